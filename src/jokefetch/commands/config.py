"""``jokefetch config`` -- inspect and edit the user config file."""

from __future__ import annotations

from typing import Any

import typer

from jokefetch.exit_codes import EXIT_INVALID_USAGE
from jokefetch.output import error, format_response, info, print_data, success


config_app = typer.Typer(no_args_is_help=True)

_TRUE_WORDS = ("true", "1", "yes", "on")


def _fail(message: str) -> typer.Exit:
    error(message)
    return typer.Exit(code=EXIT_INVALID_USAGE)


def _coerce(key: str, current: Any, raw: str) -> Any:
    """Convert *raw* to the type of the value it replaces."""
    if isinstance(current, bool):
        return raw.lower() in _TRUE_WORDS
    if isinstance(current, (int, float)):
        try:
            return type(current)(raw)
        except ValueError:
            raise _fail(f"{key} expects a {type(current).__name__}, got {raw!r}") from None
    return raw


@config_app.command("show")
def config_show() -> None:
    """Print the stored configuration (defaults fill any missing keys)."""
    from jokefetch.config import get_config_dir, load_global_config

    info(f"Config directory: {get_config_dir()}")
    format_response(load_global_config().model_dump(mode="json"))


@config_app.command("path")
def config_path() -> None:
    """Print where the config file lives."""
    from jokefetch.config import global_config_path

    print_data(str(global_config_path()))


@config_app.command("set")
def config_set(
    key: str = typer.Argument(help="Dotted key, e.g. 'request.timeout'."),
    value: str = typer.Argument(help="New value."),
) -> None:
    """Change one setting and save it.

    Example::

        jokefetch config set request.timeout 10
        jokefetch config set output.banners false
    """
    from jokefetch.config import load_global_config, save_global_config
    from jokefetch.models import GlobalConfig

    data = load_global_config().model_dump(mode="json")

    *parents, leaf = key.split(".")
    section = data
    for name in parents:
        section = section.get(name)
        if not isinstance(section, dict):
            raise _fail(f"Invalid config key: {key}")
    if leaf not in section or isinstance(section[leaf], dict):
        raise _fail(f"Unknown config key: {key}")

    section[leaf] = _coerce(key, section[leaf], value)

    try:
        updated = GlobalConfig.model_validate(data)
    except ValueError as exc:
        raise _fail(f"Rejected {key}={value!r}: {exc}") from None

    save_global_config(updated)
    success(f"{key} = {section[leaf]}")


@config_app.command("reset")
def config_reset(
    force: bool = typer.Option(False, "--force", "-f", help="Do not ask first."),
) -> None:
    """Overwrite the config file with defaults."""
    from jokefetch.config import save_global_config
    from jokefetch.models import GlobalConfig

    if not force and not typer.confirm("Reset all config to defaults?"):
        info("Cancelled.")
        raise typer.Exit()

    save_global_config(GlobalConfig())
    success("Configuration reset to defaults.")
