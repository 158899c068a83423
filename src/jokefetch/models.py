"""Canonical Pydantic models shared across all jokefetch modules.

**Domain models**:
    :class:`Joke` -- the two-field record decoded from the API response, and
    :class:`FetchState` -- the lifecycle of a single exchange.

**Configuration models** -- serialised as JSON in the user's config directory:
    :class:`RequestConfig`, :class:`OutputConfig`, and :class:`GlobalConfig`.

All models use Pydantic v2.
"""

from __future__ import annotations

import enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator

from jokefetch import __version__

DEFAULT_ENDPOINT = "https://official-joke-api.appspot.com/jokes/random"


# --- Domain ---


class Joke(BaseModel):
    """A joke as returned by the Official Joke API.

    Both fields are required and must be JSON strings; numbers, nulls, or
    missing members fail validation instead of producing a partial record.
    Extra members in the payload (``id``, ``type``) are ignored.

    Example::

        Joke.model_validate_json('{"setup": "Knock knock.", "punchline": "Who is there?"}')
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    setup: StrictStr
    punchline: StrictStr

    def as_line(self) -> str:
        """Return the console rendering ``<setup> - <punchline>``."""
        return f"{self.setup} - {self.punchline}"


class FetchState(str, enum.Enum):
    """Lifecycle of a :class:`~jokefetch.fetcher.JokeFetcher`.

    ``NOT_STARTED`` -> ``AWAITING_RESPONSE`` -> one of the two ``COMPLETED_*``
    states. There is no transition back and no cancellation.
    """

    NOT_STARTED = "not_started"
    AWAITING_RESPONSE = "awaiting_response"
    COMPLETED_SUCCESS = "completed_success"
    COMPLETED_FAILURE = "completed_failure"

    @property
    def is_completed(self) -> bool:
        return self in (FetchState.COMPLETED_SUCCESS, FetchState.COMPLETED_FAILURE)


# --- Configuration ---


class RequestConfig(BaseModel):
    """HTTP settings for the single outbound request."""

    timeout: float = Field(
        default=5.0, gt=0, description="Request timeout in seconds (httpx default)"
    )
    verify_ssl: bool = Field(default=True, description="Verify SSL certificates")
    user_agent: str = Field(
        default=f"jokefetch/{__version__}", description="User-Agent header value"
    )

    @field_validator("user_agent")
    @classmethod
    def _header_safe(cls, value: str) -> str:
        # HTTP header values must be printable ASCII.
        if not value or not all(" " <= ch <= "~" for ch in value):
            raise ValueError("user_agent must be non-empty printable ASCII")
        return value


class OutputConfig(BaseModel):
    """Default output preferences stored in :class:`GlobalConfig`."""

    format: Literal["auto", "json", "plain", "rich"] = Field(
        default="auto", description="Output format: auto, json, plain, rich"
    )
    banners: bool = Field(
        default=True,
        description="Print the starting and completion banners around a fetch",
    )


class GlobalConfig(BaseModel):
    """User-wide configuration persisted at ``~/.config/jokefetch/config.json``.

    Loaded and saved by :func:`~jokefetch.config.load_global_config` and
    :func:`~jokefetch.config.save_global_config`. See
    :func:`~jokefetch.config.resolve_config` for the full precedence chain.
    """

    endpoint: str = Field(
        default=DEFAULT_ENDPOINT, description="URL of the random-joke endpoint"
    )
    request: RequestConfig = Field(default_factory=RequestConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
