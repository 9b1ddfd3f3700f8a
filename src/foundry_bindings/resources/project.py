"""AI Foundry project model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from foundry_bindings.resources.binding import ResourceBinding
from foundry_bindings.resources.category import ResourceCategory


class Project(BaseModel):
    """An AI Foundry project and its backing-resource connections.

    Only projects with ``create_project_connections`` set contribute to the
    definition tables; the rest are passed through untouched.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(min_length=1)
    display_name: str = ""
    description: str = ""
    create_project_connections: bool = False

    storage_account_connection: ResourceBinding | None = None
    cosmos_db_connection: ResourceBinding | None = None
    ai_search_connection: ResourceBinding | None = None
    key_vault_connection: ResourceBinding | None = None

    def binding_for(self, category: ResourceCategory) -> ResourceBinding | None:
        return getattr(self, category.connection_field)

    def bindings(self) -> dict[ResourceCategory, ResourceBinding]:
        """Bindings that are present, keyed by category."""
        return {
            c: b for c in ResourceCategory if (b := self.binding_for(c)) is not None
        }
