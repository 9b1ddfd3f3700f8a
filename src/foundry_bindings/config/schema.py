"""Configuration models for YAML-based binding declarations."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from foundry_bindings.resources.category import (
    Mode,  # noqa: TC001 — Pydantic needs this at runtime
    ResourceCategory,
)
from foundry_bindings.resources.definition import CategorySettings
from foundry_bindings.resources.project import (
    Project,  # noqa: TC001 — Pydantic needs this at runtime
)


class DeploymentSettings(BaseSettings):
    """Deployment-wide values passed through to the provisioning module.

    Fields can be set via YAML (constructor kwargs) or environment variables
    with the ``FOUNDRY_`` prefix.  Constructor kwargs take precedence.

    None of these affect which definitions are resolved.
    """

    model_config = SettingsConfigDict(env_prefix="FOUNDRY_")

    subscription_id: str | None = None
    location: str | None = None
    base_name: str | None = Field(default=None, pattern=r"^[a-z0-9-]{1,24}$")

    @field_validator("location")
    @classmethod
    def _lower_location(cls, v: str | None) -> str | None:
        return v.lower() if v is not None else v


def _none_to_dict(v: Any) -> Any:
    return v if v is not None else {}


class Config(BaseModel):
    """Binding configuration, validated straight from the YAML structure."""

    model_config = ConfigDict(extra="forbid")

    deployment: DeploymentSettings = Field(default_factory=DeploymentSettings)
    mode: Mode | None = None
    enable_diagnostic_settings: bool = False
    definitions: Annotated[
        dict[ResourceCategory, CategorySettings], BeforeValidator(_none_to_dict)
    ] = {}
    ai_projects: Annotated[dict[str, Project], BeforeValidator(_none_to_dict)] = {}
    output_path: Path | None = None
    config_dir: Path = Field(default=Path(), exclude=True)

    @property
    def settings(self) -> CategorySettings:
        """Settings applied to categories without an override."""
        return CategorySettings(enable_diagnostic_settings=self.enable_diagnostic_settings)
