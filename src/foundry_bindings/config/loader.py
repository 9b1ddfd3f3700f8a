"""YAML configuration file loader."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

from dotenv import dotenv_values
from pydantic import ValidationError
from ruamel.yaml import YAML

from foundry_bindings.config.schema import Config

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised for configuration loading / validation errors."""


# Field name → environment variable.
_DEPLOYMENT_ENV_MAP: dict[str, str] = {
    "subscription_id": "FOUNDRY_SUBSCRIPTION_ID",
    "location": "FOUNDRY_LOCATION",
    "base_name": "FOUNDRY_BASE_NAME",
}


def _resolve_deployment(raw_deployment: dict[str, Any], config_dir: Path) -> dict[str, Any]:
    """Resolve deployment fields from YAML, env vars, and ``.env`` file.

    Priority (highest wins): YAML value > env var > ``.env`` file.
    """
    if not isinstance(raw_deployment, dict):
        raise ConfigError("deployment must be a mapping")
    unknown = set(raw_deployment) - set(_DEPLOYMENT_ENV_MAP)
    if unknown:
        raise ConfigError(f"Unknown deployment field(s): {', '.join(sorted(unknown))}")

    env_file = config_dir / ".env"
    dotenv_vals = dotenv_values(env_file, encoding="utf-8-sig") if env_file.is_file() else {}

    resolved: dict[str, Any] = {}
    for field, env_key in _DEPLOYMENT_ENV_MAP.items():
        val = raw_deployment.get(field)
        if val is None:
            val = os.environ.get(env_key)
        if val is None:
            val = dotenv_vals.get(env_key)
        if val is not None:
            resolved[field] = str(val)

    return resolved


def _validate_unique_names(config: Config) -> list[str]:
    """Check that no two projects share the same Foundry project name."""
    seen: dict[str, str] = {}
    errors: list[str] = []
    for key, project in config.ai_projects.items():
        if project.name in seen:
            errors.append(
                f"Duplicate project name '{project.name}': "
                f"found in both ai_projects.{seen[project.name]} and ai_projects.{key}"
            )
        else:
            seen[project.name] = key
    return errors


def load_config(path: Path | str) -> Config:
    """Load a YAML configuration file and return a ``Config`` object.

    Raises:
        ConfigError: On YAML parse errors, missing sections, or validation failures.
    """
    path = Path(path)

    try:
        raw = YAML(typ="safe").load(path)
    except Exception as exc:
        raise ConfigError(f"Failed to read {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"{path}: top-level YAML must be a mapping")
    if "config_dir" in raw:
        raise ConfigError(
            f"{path}: 'config_dir' is set from the file location, not from YAML"
        )

    try:
        raw["deployment"] = _resolve_deployment(raw.get("deployment") or {}, path.parent)
        config = Config.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc

    config.config_dir = path.parent
    if config.output_path is not None and not config.output_path.is_absolute():
        config.output_path = config.config_dir / config.output_path

    errors = _validate_unique_names(config)
    if errors:
        raise ConfigError("\n".join(errors))

    logger.info("Loaded config from %s (%d projects)", path, len(config.ai_projects))
    return config
