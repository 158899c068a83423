"""The request/decode/report flow behind ``jokefetch fetch``.

A :class:`JokeFetcher` performs exactly one exchange with the joke endpoint:

1. :meth:`JokeFetcher.start` moves the fetcher to ``AWAITING_RESPONSE`` and
   runs the GET on a worker thread, so the caller never blocks on the
   network call itself.
2. When the exchange ends, successfully or not, the worker builds a
   :class:`FetchResult` and invokes the completion callback exactly once.
   A transport failure short-circuits: the body is never decoded.
3. The worker then fires the one-shot :class:`CompletionSignal`, whatever
   happened in steps 1 and 2.
4. :meth:`JokeFetcher.wait` blocks on that signal and hands back the result.

:func:`fetch_joke` wraps the whole sequence with the console banners and is
what the CLI calls. Neither failure class escapes it: both are printed as a
line and the function returns normally.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Any, Callable, Optional

import httpx

from jokefetch.client import JokeClient, decode_joke
from jokefetch.exceptions import DecodeError, JokeFetchError, TransportError
from jokefetch.models import DEFAULT_ENDPOINT, FetchState, Joke, RequestConfig
from jokefetch.output import get_output

START_BANNER = "Starting request to fetch a random joke..."
COMPLETED_BANNER = "Request completed"
TRANSPORT_ERROR_PREFIX = "Error fetching joke"
DECODE_ERROR_LINE = "Error decoding JSON"


@dataclass(frozen=True)
class FetchResult:
    """Outcome of one exchange: a :class:`Joke` or the error that prevented it.

    Exactly one of ``joke`` and ``error`` is set.
    """

    joke: Optional[Joke] = None
    error: Optional[JokeFetchError] = None

    def __post_init__(self) -> None:
        if (self.joke is None) == (self.error is None):
            raise ValueError("FetchResult needs exactly one of joke or error")

    @property
    def ok(self) -> bool:
        return self.joke is not None

    def to_dict(self) -> dict[str, Any]:
        """Machine-readable form used by ``--json`` output."""
        if self.joke is not None:
            return self.joke.model_dump()
        return {"error": describe_outcome(self)}


def describe_outcome(result: FetchResult) -> str:
    """Return the console line for *result*.

    * success -- ``<setup> - <punchline>``
    * transport failure -- ``Error fetching joke: <description>``
    * decode failure -- ``Error decoding JSON``
    """
    if result.joke is not None:
        return result.joke.as_line()
    if isinstance(result.error, DecodeError):
        return DECODE_ERROR_LINE
    return f"{TRANSPORT_ERROR_PREFIX}: {result.error}"


class CompletionSignal:
    """One-shot completion event, initially unsignaled.

    Wraps :class:`threading.Event`. Unlike a bare event it refuses to fire a
    second time, so a double completion shows up as an error instead of
    passing silently.
    """

    def __init__(self) -> None:
        self._event = threading.Event()
        self._lock = threading.Lock()

    @property
    def is_signaled(self) -> bool:
        return self._event.is_set()

    def signal(self) -> None:
        """Fire the signal.

        Raises:
            RuntimeError: If the signal has already fired.
        """
        with self._lock:
            if self._event.is_set():
                raise RuntimeError("Completion signal already fired")
            self._event.set()

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until the signal fires; return ``False`` if *timeout* elapsed first."""
        return self._event.wait(timeout)


class JokeFetcher:
    """Single-use fetcher for one random joke.

    Args:
        endpoint: URL of the random-joke endpoint.
        request: HTTP settings passed to :class:`~jokefetch.client.JokeClient`.
        transport: Optional httpx transport (tests inject
            :class:`httpx.MockTransport`).

    Example::

        fetcher = JokeFetcher()
        fetcher.start(lambda result: print(describe_outcome(result)))
        fetcher.wait()
    """

    def __init__(
        self,
        endpoint: str = DEFAULT_ENDPOINT,
        request: Optional[RequestConfig] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._endpoint = endpoint
        self._request = request or RequestConfig()
        self._transport = transport
        self._state = FetchState.NOT_STARTED
        self._state_lock = threading.Lock()
        self._signal = CompletionSignal()
        self._result: Optional[FetchResult] = None
        self._failure: Optional[BaseException] = None

    @property
    def state(self) -> FetchState:
        return self._state

    @property
    def result(self) -> Optional[FetchResult]:
        """The result once completed, else ``None``."""
        return self._result

    def start(
        self, on_complete: Optional[Callable[[FetchResult], None]] = None
    ) -> CompletionSignal:
        """Dispatch the request on a worker thread and return immediately.

        Args:
            on_complete: Called exactly once on the worker thread with the
                :class:`FetchResult`.

        Returns:
            The :class:`CompletionSignal` that fires after *on_complete*
            returns.

        Raises:
            RuntimeError: If this fetcher has already been started.
        """
        with self._state_lock:
            if self._state is not FetchState.NOT_STARTED:
                raise RuntimeError("JokeFetcher can only be started once")
            self._transition(FetchState.AWAITING_RESPONSE)

        worker = threading.Thread(
            target=self._run,
            args=(on_complete,),
            name="jokefetch-request",
            daemon=True,
        )
        worker.start()
        return self._signal

    def wait(self, timeout: Optional[float] = None) -> FetchResult:
        """Block until the exchange completes and return its result.

        Exceptions raised by the completion callback, or unexpected errors in
        the worker, are re-raised here in the caller's thread.

        Raises:
            RuntimeError: If the fetcher was never started.
            TimeoutError: If *timeout* elapses before completion.
        """
        if self._state is FetchState.NOT_STARTED:
            raise RuntimeError("JokeFetcher has not been started")
        if not self._signal.wait(timeout):
            raise TimeoutError(f"No response from {self._endpoint} within {timeout}s")
        if self._failure is not None:
            raise self._failure
        assert self._result is not None
        return self._result

    def fetch(
        self, on_complete: Optional[Callable[[FetchResult], None]] = None
    ) -> FetchResult:
        """Start the exchange and block until it completes."""
        self.start(on_complete)
        return self.wait()

    # ------------------------------------------------------------------ #
    # Worker thread
    # ------------------------------------------------------------------ #

    def _run(self, on_complete: Optional[Callable[[FetchResult], None]]) -> None:
        try:
            result = self._exchange()
            self._result = result
            self._transition(
                FetchState.COMPLETED_SUCCESS if result.ok else FetchState.COMPLETED_FAILURE
            )
            if on_complete is not None:
                on_complete(result)
        except BaseException as exc:
            self._failure = exc
            if not self._state.is_completed:
                self._transition(FetchState.COMPLETED_FAILURE)
        finally:
            self._signal.signal()

    def _exchange(self) -> FetchResult:
        try:
            with JokeClient(self._endpoint, self._request, self._transport) as client:
                response = client.get()
        except TransportError as exc:
            return FetchResult(error=exc)

        try:
            joke = decode_joke(response.content)
        except DecodeError as exc:
            get_output().debug(str(exc))
            return FetchResult(error=exc)
        return FetchResult(joke=joke)

    def _transition(self, new_state: FetchState) -> None:
        get_output().debug(f"fetch state: {self._state.value} -> {new_state.value}")
        self._state = new_state


def fetch_joke(
    endpoint: str = DEFAULT_ENDPOINT,
    request: Optional[RequestConfig] = None,
    transport: Optional[httpx.BaseTransport] = None,
    banners: bool = True,
) -> FetchResult:
    """Fetch one joke and print the outcome, blocking until it is done.

    Prints the starting banner, dispatches a :class:`JokeFetcher` whose
    callback prints the outcome line, waits for the completion signal, then
    prints the completion banner.

    Args:
        endpoint: URL of the random-joke endpoint.
        request: HTTP settings for the request.
        transport: Optional httpx transport override.
        banners: Print the starting and completion banners.

    Returns:
        The :class:`FetchResult`, already reported on stdout.
    """
    output = get_output()
    if banners:
        output.banner(START_BANNER)

    def _report(result: FetchResult) -> None:
        output.print_result(describe_outcome(result), result.to_dict())

    fetcher = JokeFetcher(endpoint, request, transport)
    fetcher.start(_report)
    result = fetcher.wait()

    if banners:
        output.banner(COMPLETED_BANNER)
    return result
