"""Tests for the blocking joke client."""

from __future__ import annotations

import httpx
import pytest

from jokefetch.client import JokeClient
from jokefetch.exceptions import DecodeError, TransportError
from jokefetch.models import DEFAULT_ENDPOINT, RequestConfig
from jokefetch.output import OutputManager, reset_output, set_output


@pytest.fixture(autouse=True)
def _clean_output():
    """Install a quiet output manager for every test."""
    set_output(OutputManager(no_color=True, quiet=True))
    yield
    reset_output()


def _client(handler, endpoint: str = DEFAULT_ENDPOINT, **request) -> JokeClient:
    return JokeClient(
        endpoint,
        RequestConfig(**request),
        transport=httpx.MockTransport(handler),
    )


# ---------------------------------------------------------------------------
# Context manager
# ---------------------------------------------------------------------------


class TestContextManager:
    def test_enter_creates_client(self) -> None:
        client = JokeClient()
        assert client._client is None
        with client:
            assert client._client is not None
        assert client._client is None

    def test_get_outside_context_fails(self) -> None:
        with pytest.raises(AssertionError):
            JokeClient().get()


# ---------------------------------------------------------------------------
# Request shape
# ---------------------------------------------------------------------------


class TestRequest:
    def test_sends_single_get_to_endpoint(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"setup": "S", "punchline": "P"})

        with _client(handler) as client:
            client.get()

        assert len(seen) == 1
        assert seen[0].method == "GET"
        assert str(seen[0].url) == DEFAULT_ENDPOINT
        assert seen[0].content == b""

    def test_sends_accept_and_user_agent(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.headers["accept"] == "application/json"
            assert request.headers["user-agent"] == "tests/1.0"
            return httpx.Response(200, json={"setup": "S", "punchline": "P"})

        with _client(handler, user_agent="tests/1.0") as client:
            assert client.get().status_code == 200

    def test_custom_endpoint(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.host == "localhost"
            assert request.url.path == "/jokes/random"
            return httpx.Response(200, json={"setup": "S", "punchline": "P"})

        with _client(handler, endpoint="http://localhost:8080/jokes/random") as client:
            client.get()


# ---------------------------------------------------------------------------
# Error mapping
# ---------------------------------------------------------------------------


class TestErrorMapping:
    def test_connect_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("Connection refused", request=request)

        with _client(handler) as client:
            with pytest.raises(TransportError, match="Connection refused"):
                client.get()

    def test_timeout(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        with _client(handler) as client:
            with pytest.raises(TransportError, match="timed out"):
                client.get()

    def test_non_2xx_status(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, json={"setup": "S", "punchline": "P"})

        with _client(handler) as client:
            with pytest.raises(TransportError, match="HTTP 500"):
                client.get_joke()

    def test_no_retry_on_failure(self) -> None:
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(503)

        with _client(handler) as client:
            with pytest.raises(TransportError):
                client.get()
        assert len(calls) == 1

    def test_missing_scheme(self) -> None:
        with JokeClient("not-a-url") as client:
            with pytest.raises(TransportError):
                client.get()


# ---------------------------------------------------------------------------
# get_joke
# ---------------------------------------------------------------------------


class TestGetJoke:
    def test_decodes_joke(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"setup": "S", "punchline": "P", "id": 1})

        with _client(handler) as client:
            assert client.get_joke().as_line() == "S - P"

    def test_bad_body(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={})

        with _client(handler) as client:
            with pytest.raises(DecodeError):
                client.get_joke()
