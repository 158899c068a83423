"""The ``fetch`` command -- fetch one random joke and print it."""

from __future__ import annotations

from typing import Optional

import typer

from jokefetch.output import OutputFormat, OutputManager, debug, get_output, set_output


def fetch_command(
    ctx: typer.Context,
    endpoint: Optional[str] = typer.Option(
        None, "--endpoint", "-e", help="Joke endpoint URL (overrides config)."
    ),
    timeout: Optional[float] = typer.Option(
        None, "--timeout", "-t", min=0.001, help="Request timeout in seconds."
    ),
) -> None:
    """Fetch a random joke and print '<setup> - <punchline>'.

    Transport and decode failures are printed as a single line and the
    command still exits 0.

    Example::

        jokefetch fetch
        jokefetch --json fetch --endpoint http://localhost:8080/jokes/random
    """
    from jokefetch.config import resolve_config
    from jokefetch.fetcher import fetch_joke

    obj = ctx.obj or {}
    format_flag: Optional[str] = obj.get("format")
    config = resolve_config(
        cli_endpoint=endpoint, cli_timeout=timeout, cli_format=format_flag
    )

    # A configured default format applies only when no format flag was given.
    if format_flag is None and config.output.format != OutputFormat.AUTO.value:
        current = get_output()
        set_output(
            OutputManager(
                format=OutputFormat(config.output.format),
                no_color=obj.get("no_color", False),
                quiet=current.is_quiet,
                verbose=current.is_verbose,
            )
        )

    debug(f"Endpoint: {config.endpoint} (timeout {config.request.timeout}s)")
    fetch_joke(config.endpoint, config.request, banners=config.output.banners)
