"""Asynchronous HTTP client -- mirrors :class:`~jokefetch.client.sync_client.JokeClient`.

:class:`AsyncJokeClient` wraps :class:`httpx.AsyncClient` and offers the same
error mapping, for callers that already run inside an event loop and want to
``await`` a joke instead of blocking on
:class:`~jokefetch.fetcher.JokeFetcher`.
"""

from __future__ import annotations

from typing import Optional

import httpx

from jokefetch.client.response import check_response, decode_joke, transport_error
from jokefetch.models import DEFAULT_ENDPOINT, Joke, RequestConfig
from jokefetch.output import get_output


class AsyncJokeClient:
    """Asynchronous client for the random-joke endpoint.

    Must be used as an async context manager.

    Args:
        endpoint: Absolute URL of the random-joke endpoint.
        request: Timeout, SSL verification, and User-Agent settings.
        transport: Optional async httpx transport (tests use
            :class:`httpx.MockTransport`).

    Example::

        async with AsyncJokeClient() as client:
            joke = await client.get_joke()
    """

    def __init__(
        self,
        endpoint: str = DEFAULT_ENDPOINT,
        request: Optional[RequestConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._endpoint = endpoint
        self._request = request or RequestConfig()
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self) -> AsyncJokeClient:
        self._client = httpx.AsyncClient(
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

    async def __aexit__(self, *args: object) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    async def get(self) -> httpx.Response:
        """Send the GET request and return the 2xx response.

        Raises:
            TransportError: On network errors and non-2xx statuses.
        """
        assert self._client is not None, "Client not initialised -- use as async context manager"

        output = get_output()
        output.debug(f"GET {self._endpoint}")
        try:
            response = await self._client.get(self._endpoint)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise transport_error(exc) from exc

        output.debug(f"HTTP {response.status_code} ({len(response.content)} bytes)")
        check_response(response)
        return response

    async def get_joke(self) -> Joke:
        """Fetch and decode one joke.

        Raises:
            TransportError: See :meth:`get`.
            DecodeError: If the body does not decode into a :class:`Joke`.
        """
        response = await self.get()
        return decode_joke(response.content)
