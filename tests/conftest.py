"""Shared test fixtures for jokefetch.

Provides reusable fixtures for isolating configuration, managing output
state, substituting the network with :class:`httpx.MockTransport`, and
running CLI commands. These fixtures are automatically discovered by pytest.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import httpx
import pytest

from jokefetch.output import OutputFormat, OutputManager, reset_output, set_output


CHICKEN = {
    "type": "general",
    "setup": "Why did the chicken cross the road?",
    "punchline": "To get to the other side.",
    "id": 1,
}
CHICKEN_LINE = "Why did the chicken cross the road? - To get to the other side."


# ---------------------------------------------------------------------------
# Auto-reset global output state between tests
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_output_between_tests() -> None:
    """Reset the global OutputManager after every test.

    The OutputManager caches Rich consoles bound to the sys.stdout/sys.stderr
    objects that were current when it was created. CliRunner swaps those
    streams during a test, so a fresh manager is forced on next use.
    """
    yield
    reset_output()


# ---------------------------------------------------------------------------
# Config isolation fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Isolate configuration to a temporary directory.

    Points XDG_CONFIG_HOME and XDG_DATA_HOME at subdirectories of tmp_path,
    clears JOKEFETCH_* environment variables, forces the XDG code path, and
    changes the working directory to tmp_path.

    Returns:
        The tmp_path root directory for additional file creation.
    """
    monkeypatch.setattr("jokefetch.config._is_xdg_platform", lambda: True)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    monkeypatch.delenv("JOKEFETCH_ENDPOINT", raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


# ---------------------------------------------------------------------------
# Output fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def plain_output() -> OutputManager:
    """Install a PLAIN, colourless OutputManager as the global output."""
    output = OutputManager(format=OutputFormat.PLAIN, no_color=True)
    set_output(output)
    yield output
    reset_output()


@pytest.fixture
def json_output() -> OutputManager:
    """Install a JSON-format OutputManager as the global output."""
    output = OutputManager(format=OutputFormat.JSON, no_color=True)
    set_output(output)
    yield output
    reset_output()


# ---------------------------------------------------------------------------
# Network fixtures
# ---------------------------------------------------------------------------


def json_handler(
    data: Any, status_code: int = 200
) -> Callable[[httpx.Request], httpx.Response]:
    """Build a MockTransport handler that always answers with *data* as JSON."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, json=data)

    return handler


def raw_handler(
    content: bytes, status_code: int = 200
) -> Callable[[httpx.Request], httpx.Response]:
    """Build a MockTransport handler that answers with raw *content*."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            status_code,
            content=content,
            headers={"content-type": "application/json"},
        )

    return handler


def refusing_handler(request: httpx.Request) -> httpx.Response:
    """MockTransport handler that fails the way a closed port does."""
    raise httpx.ConnectError("[Errno 111] Connection refused", request=request)


@pytest.fixture
def mock_api(monkeypatch: pytest.MonkeyPatch):
    """Route every JokeClient created by the fetcher through a MockTransport.

    Usage::

        requests = mock_api(json_handler(CHICKEN))

    Returns:
        A function that installs *handler* and returns the list the
        intercepted requests are appended to.
    """
    from jokefetch.client import JokeClient

    def install(handler: Callable[[httpx.Request], httpx.Response]) -> list[httpx.Request]:
        seen: list[httpx.Request] = []

        def recording(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return handler(request)

        transport = httpx.MockTransport(recording)
        monkeypatch.setattr(
            "jokefetch.fetcher.JokeClient",
            lambda endpoint, request, _transport=None: JokeClient(endpoint, request, transport),
        )
        return seen

    return install


# ---------------------------------------------------------------------------
# CLI runner fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def cli_runner():
    """Typer CLI test runner."""
    from typer.testing import CliRunner

    return CliRunner()


def write_json(path: Path, data: Any) -> None:
    """Write *data* as JSON to *path*, creating parent dirs."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
