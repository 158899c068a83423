"""HTTP client module for jokefetch.

Provides blocking and awaitable clients that wrap :mod:`httpx` for the single
call jokefetch makes: a GET against the random-joke endpoint.

Classes:
    :class:`JokeClient` -- blocking client backed by :class:`httpx.Client`.
    :class:`AsyncJokeClient` -- non-blocking client backed by :class:`httpx.AsyncClient`.

Both clients are context managers, map every transport-level failure
(including non-2xx statuses) to :class:`~jokefetch.exceptions.TransportError`,
and decode bodies with :func:`~jokefetch.client.response.decode_joke`.

Example::

    from jokefetch.client import JokeClient

    with JokeClient(config.endpoint, config.request) as client:
        joke = client.get_joke()
"""

from jokefetch.client.async_client import AsyncJokeClient
from jokefetch.client.response import decode_joke
from jokefetch.client.sync_client import JokeClient

__all__ = ["JokeClient", "AsyncJokeClient", "decode_joke"]
