"""Binding resolution engine."""

from foundry_bindings.engine.errors import (
    AmbiguousModeError,
    BindingError,
    BindingValidationError,
    MissingIdentityError,
    MixedModeError,
    ResolverError,
)
from foundry_bindings.engine.extractor import extract_identities
from foundry_bindings.engine.materializer import (
    SHARED_IDENTITY,
    DefinitionTable,
    materialize,
    shared_secret_store,
)
from foundry_bindings.engine.resolver import detect_mode, resolve_definitions, validate_bindings
from foundry_bindings.engine.types import ResolvedDefinitions

__all__ = [
    "SHARED_IDENTITY",
    "AmbiguousModeError",
    "BindingError",
    "BindingValidationError",
    "DefinitionTable",
    "MissingIdentityError",
    "MixedModeError",
    "ResolvedDefinitions",
    "ResolverError",
    "detect_mode",
    "extract_identities",
    "materialize",
    "resolve_definitions",
    "shared_secret_store",
    "validate_bindings",
]
