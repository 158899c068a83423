"""Response handling shared by both clients -- status mapping and joke decoding.

:func:`check_response` turns a non-2xx :class:`httpx.Response` into a
:class:`~jokefetch.exceptions.TransportError`; :func:`transport_error` does
the same for exceptions raised by :mod:`httpx` itself. Only a 2xx body ever
reaches :func:`decode_joke`.
"""

from __future__ import annotations

import httpx
from pydantic import ValidationError

from jokefetch.exceptions import DecodeError, TransportError
from jokefetch.models import Joke


def transport_error(exc: Exception) -> TransportError:
    """Wrap an exception raised by :mod:`httpx` in a :class:`TransportError`.

    Some httpx exceptions (notably timeouts) carry an empty message; the
    exception class name is used as the description in that case.
    """
    description = str(exc) or type(exc).__name__
    return TransportError(description)


def check_response(response: httpx.Response) -> None:
    """Raise :class:`TransportError` unless *response* has a 2xx status.

    The message reads ``HTTP <status> <reason>``, e.g. ``HTTP 503 Service
    Unavailable``.
    """
    if response.is_success:
        return
    reason = response.reason_phrase or ""
    raise TransportError(f"HTTP {response.status_code} {reason}".rstrip())


def decode_joke(body: bytes) -> Joke:
    """Decode a UTF-8 JSON response body into a :class:`Joke`.

    Args:
        body: The raw response content.

    Returns:
        The decoded joke. Members other than ``setup`` and ``punchline`` are
        ignored.

    Raises:
        DecodeError: If *body* is not UTF-8, not JSON, not a JSON object, or
            lacks a string ``setup`` or ``punchline``.
    """
    try:
        text = body.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise DecodeError(f"Response body is not valid UTF-8: {exc}") from exc

    try:
        return Joke.model_validate_json(text)
    except ValidationError as exc:
        raise DecodeError(f"Response body is not a joke: {exc}") from exc
