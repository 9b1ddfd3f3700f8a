"""Project-to-resource binding model."""

from __future__ import annotations

from enum import Enum
from typing import Self

from pydantic import BaseModel, ConfigDict, model_validator


class BindingVariant(str, Enum):
    EXISTING_REFERENCE = "existing_reference"
    NEW_RESOURCE_KEY = "new_resource_key"


class ResourceBinding(BaseModel):
    """A project's connection to one backing resource.

    Declaring ``existing_resource_id`` points the project at a resource that
    already exists outside this deployment.  Declaring ``new_resource_map_key``
    groups the project with every other project using the same key onto one
    freshly provisioned resource.  Giving both a value, even an empty string,
    is rejected.  A binding declaring neither is allowed; how it resolves
    depends on the deployment mode.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    existing_resource_id: str | None = None
    new_resource_map_key: str | None = None

    @model_validator(mode="after")
    def _not_both(self) -> Self:
        if self.existing_resource_id is not None and self.new_resource_map_key is not None:
            raise ValueError(
                "Only one of 'existing_resource_id' or 'new_resource_map_key' may be set"
            )
        return self

    def declared_variant(self) -> BindingVariant | None:
        """Which variant the binding was written as, regardless of value.

        ``existing_resource_id: ""`` still counts as an existing reference;
        it is the "not configured" case that resolution filters out.
        """
        if self.new_resource_map_key is not None:
            return BindingVariant.NEW_RESOURCE_KEY
        if "existing_resource_id" in self.model_fields_set:
            return BindingVariant.EXISTING_REFERENCE
        if "new_resource_map_key" in self.model_fields_set:
            return BindingVariant.NEW_RESOURCE_KEY
        return None
