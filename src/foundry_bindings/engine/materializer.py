"""Definition materialization: identities -> definition tables."""

from __future__ import annotations

from typing import TYPE_CHECKING

from foundry_bindings.resources.definition import CategorySettings, DefinitionRecord

if TYPE_CHECKING:
    from collections.abc import Iterable

SHARED_IDENTITY = "shared"

DefinitionTable = dict[str, DefinitionRecord]


def materialize(
    identities: Iterable[str], settings: CategorySettings | None = None
) -> DefinitionTable:
    """Build one definition record per distinct identity, all sharing *settings*.

    Repeated identities collapse onto the first record written for them.
    Entries are keyed in sorted order so rendered output is stable.
    """
    settings = settings or CategorySettings()
    table: DefinitionTable = {}
    for identity in sorted(identities):
        if identity not in table:
            table[identity] = DefinitionRecord(identity=identity, settings=settings)
    return table


def shared_secret_store(settings: CategorySettings | None = None) -> DefinitionTable:
    """The single account-scoped secret store used by auto-provisioned deployments."""
    return materialize([SHARED_IDENTITY], settings)
