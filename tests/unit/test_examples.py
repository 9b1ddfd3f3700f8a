"""The shipped example configurations load and resolve."""

from __future__ import annotations

from pathlib import Path

from foundry_bindings.config import load, resolve
from foundry_bindings.resources.category import Mode

_EXAMPLES = Path(__file__).resolve().parents[2] / "examples"


def test_byor_example() -> None:
    resolved = resolve(load(_EXAMPLES / "byor" / "foundry-bindings.yaml"))
    assert resolved.mode == Mode.EXISTING_RESOURCE
    assert resolved.summary() == {
        "storage": 1,
        "document_database": 1,
        "search_index": 1,
        "secret_store": 1,
    }


def test_auto_provisioned_example() -> None:
    resolved = resolve(load(_EXAMPLES / "auto_provisioned" / "foundry-bindings.yaml"))
    assert resolved.mode == Mode.AUTO_PROVISIONED
    assert list(resolved.storage) == ["team_a"]
    assert list(resolved.document_database) == ["team_a"]
    assert list(resolved.search_index) == ["project_1"]
    assert list(resolved.secret_store) == ["shared"]
    assert resolved.search_index["project_1"].settings.enable_diagnostic_settings is True
