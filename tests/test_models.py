"""Tests for jokefetch.models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from jokefetch.models import (
    DEFAULT_ENDPOINT,
    FetchState,
    GlobalConfig,
    Joke,
    OutputConfig,
    RequestConfig,
)


class TestJoke:
    def test_valid_payload(self) -> None:
        joke = Joke.model_validate({"setup": "S", "punchline": "P"})
        assert joke.setup == "S"
        assert joke.punchline == "P"

    def test_extra_members_ignored(self) -> None:
        joke = Joke.model_validate(
            {"id": 7, "type": "programming", "setup": "S", "punchline": "P"}
        )
        assert joke.model_dump() == {"setup": "S", "punchline": "P"}

    @pytest.mark.parametrize(
        "payload",
        [
            {},
            {"setup": "S"},
            {"punchline": "P"},
            {"setup": 1, "punchline": "P"},
            {"setup": "S", "punchline": None},
            {"setup": ["S"], "punchline": "P"},
        ],
    )
    def test_invalid_shapes_rejected(self, payload: dict) -> None:
        with pytest.raises(ValidationError):
            Joke.model_validate(payload)

    def test_empty_strings_are_still_strings(self) -> None:
        joke = Joke.model_validate({"setup": "", "punchline": ""})
        assert joke.as_line() == " - "

    def test_as_line(self) -> None:
        joke = Joke(setup="Knock knock.", punchline="Who's there?")
        assert joke.as_line() == "Knock knock. - Who's there?"

    def test_frozen(self) -> None:
        joke = Joke(setup="S", punchline="P")
        with pytest.raises(ValidationError):
            joke.setup = "changed"  # type: ignore[misc]


class TestFetchState:
    def test_completed_states(self) -> None:
        assert FetchState.COMPLETED_SUCCESS.is_completed
        assert FetchState.COMPLETED_FAILURE.is_completed

    def test_pending_states(self) -> None:
        assert not FetchState.NOT_STARTED.is_completed
        assert not FetchState.AWAITING_RESPONSE.is_completed


class TestConfigModels:
    def test_defaults(self) -> None:
        config = GlobalConfig()
        assert config.endpoint == DEFAULT_ENDPOINT
        assert config.request.timeout == 5.0
        assert config.request.verify_ssl is True
        assert config.request.user_agent.startswith("jokefetch/")
        assert config.output.format == "auto"
        assert config.output.banners is True

    def test_default_endpoint(self) -> None:
        assert DEFAULT_ENDPOINT == "https://official-joke-api.appspot.com/jokes/random"

    def test_timeout_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            RequestConfig(timeout=0)

    @pytest.mark.parametrize("agent", ["jokefetch/\u00e9", "bad\r\nX-Injected: 1", ""])
    def test_user_agent_must_be_header_safe(self, agent: str) -> None:
        with pytest.raises(ValidationError):
            RequestConfig(user_agent=agent)

    def test_unknown_output_format_rejected(self) -> None:
        with pytest.raises(ValidationError):
            OutputConfig(format="xml")

    def test_round_trip_through_json_mode_dump(self) -> None:
        config = GlobalConfig(endpoint="http://localhost:9/jokes")
        restored = GlobalConfig.model_validate(config.model_dump(mode="json"))
        assert restored == config
