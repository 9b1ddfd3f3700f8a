"""Resource categories and deployment modes."""

from __future__ import annotations

from enum import Enum


class ResourceCategory(str, Enum):
    """Kinds of backing infrastructure a Foundry project can connect to."""

    STORAGE = "storage"
    DOCUMENT_DATABASE = "document_database"
    SEARCH_INDEX = "search_index"
    SECRET_STORE = "secret_store"

    @property
    def connection_field(self) -> str:
        """Project field holding the binding for this category."""
        return _CONNECTION_FIELDS[self]

    @property
    def definition_variable(self) -> str:
        """Upstream module variable that receives this category's table."""
        return _DEFINITION_VARIABLES[self]


_CONNECTION_FIELDS: dict[ResourceCategory, str] = {
    ResourceCategory.STORAGE: "storage_account_connection",
    ResourceCategory.DOCUMENT_DATABASE: "cosmos_db_connection",
    ResourceCategory.SEARCH_INDEX: "ai_search_connection",
    ResourceCategory.SECRET_STORE: "key_vault_connection",
}

_DEFINITION_VARIABLES: dict[ResourceCategory, str] = {
    ResourceCategory.STORAGE: "storage_account_definition",
    ResourceCategory.DOCUMENT_DATABASE: "cosmosdb_definition",
    ResourceCategory.SEARCH_INDEX: "ai_search_definition",
    ResourceCategory.SECRET_STORE: "key_vault_definition",
}


class Mode(str, Enum):
    """How backing resources are obtained for a whole deployment."""

    EXISTING_RESOURCE = "existing_resource"
    AUTO_PROVISIONED = "auto_provisioned"
