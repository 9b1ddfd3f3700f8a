"""Resolution result types."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from foundry_bindings.resources.category import Mode, ResourceCategory
from foundry_bindings.resources.definition import DefinitionRecord


class ResolvedDefinitions(BaseModel):
    """Definition tables for every category, ready for the provisioning module."""

    mode: Mode
    storage: dict[str, DefinitionRecord] = Field(default_factory=dict)
    document_database: dict[str, DefinitionRecord] = Field(default_factory=dict)
    search_index: dict[str, DefinitionRecord] = Field(default_factory=dict)
    secret_store: dict[str, DefinitionRecord] = Field(default_factory=dict)

    def table(self, category: ResourceCategory) -> dict[str, DefinitionRecord]:
        return getattr(self, category.value)

    def summary(self) -> dict[str, int]:
        return {c.value: len(self.table(c)) for c in ResourceCategory}

    def to_module_inputs(self) -> dict[str, dict[str, dict[str, Any]]]:
        """Render tables as ``{definition_variable: {identity: settings}}``."""
        return {
            c.definition_variable: {
                identity: record.to_module_input()
                for identity, record in sorted(self.table(c).items())
            }
            for c in ResourceCategory
        }
