"""CLI application for foundry-bindings."""

from __future__ import annotations

import logging
import os
import sys

import typer

from foundry_bindings import __version__

app = typer.Typer(
    name="foundry-bindings",
    no_args_is_help=True,
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"foundry-bindings {__version__}")
        raise typer.Exit


LOGGER_NAME = "foundry_bindings"
LOG_LEVEL_ENV = "FOUNDRY_LOG"

_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"
_VALID_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _configure_logging(verbose: int) -> None:
    """Set up stdlib logging based on ``-v`` flags or ``FOUNDRY_LOG`` env var."""
    env_level = os.environ.get(LOG_LEVEL_ENV, "").upper()
    if env_level:
        if env_level not in _VALID_LEVELS:
            print(
                f"WARNING: invalid {LOG_LEVEL_ENV} level '{env_level}', "
                f"expected one of {', '.join(sorted(_VALID_LEVELS))}; defaulting to INFO",
                file=sys.stderr,
            )
        level = getattr(logging, env_level, logging.INFO)
    elif verbose >= 2:
        level = logging.DEBUG
    elif verbose >= 1:
        level = logging.INFO
    else:
        return
    logging.basicConfig(
        level=logging.WARNING,
        format=_LOG_FORMAT,
        stream=sys.stderr,
        force=True,
    )
    logging.getLogger(LOGGER_NAME).setLevel(level)


@app.callback()
def main(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help=(
            f"Increase {LOGGER_NAME} log verbosity (-v info, -vv debug); "
            f"{LOG_LEVEL_ENV} overrides."
        ),
    ),
) -> None:
    """Resolve shared backing resources for Azure AI Foundry projects."""
    _ = version
    _configure_logging(verbose)


# Register commands after app is created to avoid circular imports.
from foundry_bindings.cli import commands as _commands  # noqa: E402, F401
