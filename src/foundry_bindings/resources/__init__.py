"""Data model for projects, bindings and definitions."""

from foundry_bindings.resources.binding import BindingVariant, ResourceBinding
from foundry_bindings.resources.category import Mode, ResourceCategory
from foundry_bindings.resources.definition import CategorySettings, DefinitionRecord
from foundry_bindings.resources.project import Project

__all__ = [
    "BindingVariant",
    "CategorySettings",
    "DefinitionRecord",
    "Mode",
    "Project",
    "ResourceBinding",
    "ResourceCategory",
]
