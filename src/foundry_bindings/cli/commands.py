"""CLI command implementations."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Annotated

import typer

from foundry_bindings.cli import app
from foundry_bindings.cli.errors import handle_error

ConfigPath = Annotated[
    Path,
    typer.Option("--config", "-c", help="Path to the configuration file."),
]

NoColor = Annotated[
    bool,
    typer.Option("--no-color", help="Disable colored output."),
]


def _use_color(no_color: bool) -> bool:
    """Determine whether to use color output."""
    return not (no_color or os.environ.get("NO_COLOR"))


@app.command()
def resolve(
    config: ConfigPath = Path("foundry-bindings.yaml"),
    out: Annotated[
        Path | None,
        typer.Option("--out", "-o", help="Write the Terraform variables JSON to this file."),
    ] = None,
    no_color: NoColor = False,
) -> None:
    """Show the backing-resource definitions required by the configuration."""
    from foundry_bindings.cli.formatting import format_definitions, format_summary
    from foundry_bindings.config import load, save
    from foundry_bindings.config import resolve as resolve_fn

    color = _use_color(no_color)
    try:
        cfg = load(config)
        resolved = resolve_fn(cfg)
        out_path = out if out is not None else cfg.output_path
        if out_path is not None:
            save(cfg, resolved, out_path)
    except Exception as exc:
        raise typer.Exit(handle_error(exc, color=color)) from exc

    typer.echo(format_definitions(resolved, color=color))
    typer.echo()
    typer.echo(format_summary(resolved, color=color))

    if out_path is not None:
        typer.echo(f"\nVariables saved to {out_path}")


@app.command()
def validate(
    config: ConfigPath = Path("foundry-bindings.yaml"),
    no_color: NoColor = False,
) -> None:
    """Validate the configuration file."""
    from foundry_bindings.cli.formatting import styler
    from foundry_bindings.config import load
    from foundry_bindings.config import resolve as resolve_fn

    color = _use_color(no_color)
    try:
        cfg = load(config)
        resolve_fn(cfg)
    except Exception as exc:
        raise typer.Exit(handle_error(exc, color=color)) from exc

    typer.echo(styler(color)("Configuration is valid.", fg="green"))
