"""Resolver error types."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from foundry_bindings.resources.category import Mode, ResourceCategory


class ResolverError(Exception):
    """Base exception for resolution errors."""


class BindingError(ResolverError):
    """A single project binding that cannot be resolved."""

    def __init__(self, project: str, category: ResourceCategory, message: str) -> None:
        super().__init__(f"ai_projects.{project}.{category.connection_field}: {message}")
        self.project = project
        self.category = category


class MixedModeError(BindingError):
    """Raised when a binding's variant does not match the deployment mode."""

    def __init__(self, project: str, category: ResourceCategory, mode: Mode) -> None:
        expected = (
            "existing_resource_id"
            if mode.value == "existing_resource"
            else "new_resource_map_key"
        )
        super().__init__(
            project, category, f"mode is '{mode.value}', binding must use '{expected}'"
        )
        self.mode = mode


class MissingIdentityError(BindingError):
    """Raised when a binding declares neither identity field where one is required."""

    def __init__(self, project: str, category: ResourceCategory) -> None:
        super().__init__(
            project,
            category,
            "binding declares neither 'existing_resource_id' nor 'new_resource_map_key'",
        )


class AmbiguousModeError(ResolverError):
    """Raised when the mode cannot be inferred because bindings use both variants."""

    def __init__(self, existing: list[str], new: list[str]) -> None:
        super().__init__(
            "Cannot infer mode: existing_resource_id used by "
            f"{', '.join(existing)} and new_resource_map_key used by {', '.join(new)}"
        )
        self.existing = existing
        self.new = new


class BindingValidationError(ResolverError):
    """One or more bindings failed validation."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        msg = "Binding validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        super().__init__(msg)
