"""Synchronous HTTP client for the joke endpoint.

:class:`JokeClient` wraps :class:`httpx.Client` for a single GET. There is no
retry and no caching: one call produces one response or one
:class:`~jokefetch.exceptions.TransportError`.

See Also:
    :class:`~jokefetch.client.async_client.AsyncJokeClient` for the
    equivalent non-blocking implementation.
"""

from __future__ import annotations

from typing import Optional

import httpx

from jokefetch.client.response import check_response, decode_joke, transport_error
from jokefetch.models import DEFAULT_ENDPOINT, Joke, RequestConfig
from jokefetch.output import get_output


class JokeClient:
    """Blocking client for the random-joke endpoint.

    Must be used as a context manager so that the underlying connection pool
    is opened and closed.

    Args:
        endpoint: Absolute URL of the random-joke endpoint.
        request: Timeout, SSL verification, and User-Agent settings.
        transport: Optional httpx transport, used by tests to substitute
            :class:`httpx.MockTransport` for the network.

    Example::

        with JokeClient() as client:
            print(client.get_joke().as_line())
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
        self._client: Optional[httpx.Client] = None

    def __enter__(self) -> JokeClient:
        self._client = httpx.Client(
            timeout=self._request.timeout,
            verify=self._request.verify_ssl,
            headers={
                "Accept": "application/json",
                "User-Agent": self._request.user_agent,
            },
            follow_redirects=True,
            transport=self._transport,
        )
        return self

    def __exit__(self, *args: object) -> None:
        if self._client:
            self._client.close()
            self._client = None

    def get(self) -> httpx.Response:
        """Send the GET request and return the 2xx response.

        Raises:
            TransportError: On connection, DNS, timeout, or protocol errors,
                and on any non-2xx status.
        """
        assert self._client is not None, "Client not initialised -- use as context manager"

        output = get_output()
        output.debug(f"GET {self._endpoint}")
        try:
            response = self._client.get(self._endpoint)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise transport_error(exc) from exc

        output.debug(f"HTTP {response.status_code} ({len(response.content)} bytes)")
        check_response(response)
        return response

    def get_joke(self) -> Joke:
        """Fetch and decode one joke.

        Raises:
            TransportError: See :meth:`get`.
            DecodeError: If the body does not decode into a :class:`Joke`.
        """
        return decode_joke(self.get().content)
