"""Resolve project bindings into per-category definition tables."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from foundry_bindings.engine.errors import (
    AmbiguousModeError,
    BindingError,
    BindingValidationError,
)
from foundry_bindings.engine.extractor import check_binding, extract_identities
from foundry_bindings.engine.materializer import (
    DefinitionTable,
    materialize,
    shared_secret_store,
)
from foundry_bindings.engine.types import ResolvedDefinitions
from foundry_bindings.resources.binding import BindingVariant
from foundry_bindings.resources.category import Mode, ResourceCategory
from foundry_bindings.resources.definition import CategorySettings

if TYPE_CHECKING:
    from collections.abc import Mapping

    from foundry_bindings.resources.project import Project

logger = logging.getLogger(__name__)


def detect_mode(projects: Mapping[str, Project]) -> Mode:
    """Infer the deployment mode from the binding variants in use.

    Only projects that create connections are considered.  With no
    declared variant at all the deployment is auto-provisioned.
    """
    existing: list[str] = []
    new: list[str] = []
    for key, project in projects.items():
        if not project.create_project_connections:
            continue
        for binding in project.bindings().values():
            variant = binding.declared_variant()
            if variant == BindingVariant.EXISTING_REFERENCE:
                existing.append(key)
            elif variant == BindingVariant.NEW_RESOURCE_KEY:
                new.append(key)
    if existing and new:
        raise AmbiguousModeError(sorted(set(existing)), sorted(set(new)))
    return Mode.EXISTING_RESOURCE if existing else Mode.AUTO_PROVISIONED


def validate_bindings(projects: Mapping[str, Project], mode: Mode) -> list[str]:
    """Return every binding error in *projects* under *mode*."""
    errors: list[str] = []
    for key, project in projects.items():
        if not project.create_project_connections:
            continue
        for category, binding in project.bindings().items():
            try:
                check_binding(key, category, binding, mode)
            except BindingError as exc:
                errors.append(str(exc))
    return errors


def resolve_definitions(
    projects: Mapping[str, Project],
    mode: Mode,
    settings: CategorySettings | None = None,
    overrides: Mapping[ResourceCategory, CategorySettings] | None = None,
) -> ResolvedDefinitions:
    """Derive the definition table for each category.

    All bindings are validated first; no table is produced if any is invalid.

    Raises:
        BindingValidationError: If one or more bindings don't fit *mode*.
    """
    errors = validate_bindings(projects, mode)
    if errors:
        raise BindingValidationError(errors)

    settings = settings or CategorySettings()
    overrides = overrides or {}

    tables: dict[str, DefinitionTable] = {}
    for category in ResourceCategory:
        category_settings = overrides.get(category, settings)
        if category == ResourceCategory.SECRET_STORE and mode == Mode.AUTO_PROVISIONED:
            tables[category.value] = shared_secret_store(category_settings)
            continue
        identities = extract_identities(projects, category, mode)
        tables[category.value] = materialize(identities, category_settings)

    resolved = ResolvedDefinitions(mode=mode, **tables)
    logger.info(
        "Resolved %d project(s) in %s mode: %s",
        len(projects),
        mode.value,
        ", ".join(f"{n} {c}" for c, n in resolved.summary().items()),
    )
    return resolved
