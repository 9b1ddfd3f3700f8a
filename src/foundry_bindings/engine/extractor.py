"""Binding extraction: projects -> distinct backing-resource identities."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from foundry_bindings.engine.errors import MissingIdentityError, MixedModeError
from foundry_bindings.resources.binding import BindingVariant
from foundry_bindings.resources.category import Mode

if TYPE_CHECKING:
    from collections.abc import Mapping

    from foundry_bindings.resources.binding import ResourceBinding
    from foundry_bindings.resources.category import ResourceCategory
    from foundry_bindings.resources.project import Project

logger = logging.getLogger(__name__)

_MODE_VARIANTS: dict[Mode, BindingVariant] = {
    Mode.EXISTING_RESOURCE: BindingVariant.EXISTING_REFERENCE,
    Mode.AUTO_PROVISIONED: BindingVariant.NEW_RESOURCE_KEY,
}


def check_binding(
    project_key: str, category: ResourceCategory, binding: ResourceBinding, mode: Mode
) -> None:
    """Raise if *binding* cannot be used under *mode*."""
    variant = binding.declared_variant()
    if variant is None:
        if mode == Mode.EXISTING_RESOURCE:
            raise MissingIdentityError(project_key, category)
        return
    if variant != _MODE_VARIANTS[mode]:
        raise MixedModeError(project_key, category, mode)


def binding_identity(
    project_key: str, category: ResourceCategory, binding: ResourceBinding, mode: Mode
) -> str | None:
    """Identity a single binding resolves to, or ``None`` if it is not configured."""
    check_binding(project_key, category, binding, mode)
    if mode == Mode.EXISTING_RESOURCE:
        return binding.existing_resource_id or None
    return binding.new_resource_map_key or project_key


def extract_identities(
    projects: Mapping[str, Project], category: ResourceCategory, mode: Mode
) -> set[str]:
    """Collect the distinct identities *category* needs across all projects.

    Projects that don't create connections, or have no binding for
    *category*, contribute nothing.  An existing reference with an empty id
    is treated as not configured.
    """
    identities: set[str] = set()
    for key, project in projects.items():
        if not project.create_project_connections:
            continue
        binding = project.binding_for(category)
        if binding is None:
            continue
        identity = binding_identity(key, category, binding, mode)
        if identity is None:
            logger.debug("%s: empty %s id, skipping", key, category.connection_field)
            continue
        identities.add(identity)
    return identities
