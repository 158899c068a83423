"""Exception hierarchy for jokefetch.

All exceptions inherit from :class:`JokeFetchError`, which carries an
``exit_code`` attribute mapped to a constant from :mod:`jokefetch.exit_codes`.

:class:`TransportError` and :class:`DecodeError` are the only two failure
classes of a fetch. Both are caught inside the completion callback and turned
into a console line; they never reach :func:`jokefetch.app.main`. Errors that
do reach the entry point (:class:`ConfigError`) make the process exit with
their code. Invalid arguments are rejected by Typer with exit code 2.

Subclass hierarchy::

    JokeFetchError (exit 1)
    +-- TransportError      (reported, exit 0)
    +-- DecodeError         (reported, exit 0)
    +-- ConfigError         (exit 1)
"""

from jokefetch.exit_codes import EXIT_GENERIC_FAILURE


class JokeFetchError(Exception):
    """Base exception for all jokefetch errors.

    Args:
        message: Human-readable error description.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class TransportError(JokeFetchError):
    """Raised when no decodable response body is available.

    Covers connection refused, DNS failure, timeouts, TLS problems, and
    non-2xx status codes. The message is the failure description shown after
    ``Error fetching joke:``.
    """


class DecodeError(JokeFetchError):
    """Raised when a response body does not parse into a :class:`~jokefetch.models.Joke`."""


class ConfigError(JokeFetchError):
    """Raised for configuration problems (invalid JSON, failed validation)."""
