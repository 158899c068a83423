"""jokefetch -- fetch a random joke from the Official Joke API and print it.

The program performs exactly one HTTP GET against a public joke endpoint,
decodes the two-field JSON body into a :class:`~jokefetch.models.Joke`, and
prints either ``<setup> - <punchline>`` or a fixed error line. The request
runs on a worker thread while the caller waits on a one-shot completion
signal, so the process never exits before the exchange has finished.

Typical usage::

    jokefetch fetch
    jokefetch --json fetch
    jokefetch config set endpoint http://localhost:8080/jokes/random

Modules:
    app: Typer application and console-script entry point.
    fetcher: The request/decode/report flow and its completion signal.
    client: Blocking and awaitable httpx wrappers for the joke endpoint.
    models: Pydantic models for the joke record and configuration.
    config: XDG-aware configuration loading and precedence resolution.
    exceptions: Exception hierarchy with exit-code mapping.
    exit_codes: Numeric exit codes following clig.dev conventions.
    output: stdout/stderr formatting system with Rich support.
"""

__version__ = "0.1.0"
