"""YAML configuration loading and convenience resolve/render API."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from foundry_bindings.config.loader import ConfigError, load_config
from foundry_bindings.config.schema import Config, DeploymentSettings
from foundry_bindings.core.tfvars import write_tfvars
from foundry_bindings.engine.errors import AmbiguousModeError
from foundry_bindings.engine.resolver import detect_mode, resolve_definitions

if TYPE_CHECKING:
    from pathlib import Path

    from foundry_bindings.engine.types import ResolvedDefinitions

__all__ = [
    "Config",
    "ConfigError",
    "DeploymentSettings",
    "load",
    "load_config",
    "render",
    "resolve",
    "save",
]


def load(path: Path | str) -> Config:
    """Load a YAML configuration file."""
    return load_config(path)


def resolve(config: Config) -> ResolvedDefinitions:
    """Resolve the definition tables for the given configuration."""
    try:
        mode = config.mode or detect_mode(config.ai_projects)
    except AmbiguousModeError as exc:
        raise ConfigError(f"{exc}; set 'mode' explicitly") from exc
    return resolve_definitions(
        config.ai_projects,
        mode,
        settings=config.settings,
        overrides=config.definitions,
    )


def render(config: Config, resolved: ResolvedDefinitions) -> dict[str, Any]:
    """Build the variables document consumed by the provisioning module."""
    variables: dict[str, Any] = {
        k: v for k, v in config.deployment.model_dump().items() if v is not None
    }
    variables["ai_projects"] = {
        key: project.model_dump(exclude_none=True) for key, project in config.ai_projects.items()
    }
    variables.update(resolved.to_module_inputs())
    return variables


def save(config: Config, resolved: ResolvedDefinitions, path: Path) -> dict[str, Any]:
    """Render and write the variables file; returns what was written."""
    variables = render(config, resolved)
    write_tfvars(path, variables)
    return variables
