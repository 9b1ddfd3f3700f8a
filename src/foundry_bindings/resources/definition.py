"""Definition records handed to the upstream provisioning module."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class CategorySettings(BaseModel):
    """Settings applied to every definition of one category."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    enable_diagnostic_settings: bool = False


class DefinitionRecord(BaseModel):
    """One backing resource to create or reference, keyed by ``identity``."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    identity: str = Field(min_length=1)
    settings: CategorySettings = Field(default_factory=CategorySettings)

    def to_module_input(self) -> dict[str, Any]:
        return self.settings.model_dump()
