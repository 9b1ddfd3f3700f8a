"""Definition table output rendering (Terraform-style)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, NamedTuple

import typer

from foundry_bindings.resources.category import Mode, ResourceCategory

if TYPE_CHECKING:
    from collections.abc import Callable

    from foundry_bindings.engine.types import ResolvedDefinitions
    from foundry_bindings.resources.definition import DefinitionRecord


class _ModeStyle(NamedTuple):
    color: str
    symbol: str
    description: str


_MODE_STYLES: dict[Mode, _ModeStyle] = {
    Mode.AUTO_PROVISIONED: _ModeStyle("green", "+", "will be created"),
    Mode.EXISTING_RESOURCE: _ModeStyle("cyan", "=", "will be connected"),
}


def styler(color: bool) -> Callable[..., str]:
    """Return ``typer.style`` when *color* is True, otherwise a passthrough."""
    if color:
        return typer.style
    return lambda text, **_kw: text


def _align_values(items: dict[str, str]) -> list[tuple[str, str]]:
    """Right-pad keys so ``=`` signs align."""
    if not items:
        return []
    max_key = max(len(k) for k in items)
    return [(k.ljust(max_key), v) for k, v in items.items()]


def _format_value(value: Any) -> str:
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    return str(value)


def format_definition(
    category: ResourceCategory, record: DefinitionRecord, mode: Mode, *, color: bool = True
) -> str:
    """Render a single definition record as a Terraform-style block."""
    style = styler(color)
    s = _MODE_STYLES[mode]
    attrs = {k: _format_value(v) for k, v in record.to_module_input().items()}
    address = f'{category.definition_variable}["{record.identity}"]'
    lines = [
        style(f"  # {address} {s.description}", bold=True, fg=s.color),
        style(f'  {s.symbol} {category.definition_variable} "{record.identity}" {{', fg=s.color),
        *[style(f"      {s.symbol} {k} = {v}", fg=s.color) for k, v in _align_values(attrs)],
        style("    }", fg=s.color),
    ]
    return "\n".join(lines)


def format_definitions(resolved: ResolvedDefinitions, *, color: bool = True) -> str:
    """Render every definition table as Terraform-style blocks."""
    blocks = [
        format_definition(category, record, resolved.mode, color=color)
        for category in ResourceCategory
        for record in resolved.table(category).values()
    ]
    if not blocks:
        return "No definitions. No project creates connections."
    return "\n\n".join(blocks)


def format_summary(resolved: ResolvedDefinitions, *, color: bool = True) -> str:
    """Render ``Definitions (auto_provisioned): 2 storage, 0 document_database, ...``"""
    style = styler(color)
    header = style(f"Definitions ({resolved.mode.value}):", bold=True)
    parts = [
        style(f"{n} {category}", fg="green") if n and color else f"{n} {category}"
        for category, n in resolved.summary().items()
    ]
    return f"{header} {', '.join(parts)}."
