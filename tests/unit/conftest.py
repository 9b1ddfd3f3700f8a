"""Shared fixtures for unit tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from foundry_bindings.config import load

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    from foundry_bindings.config.schema import Config

_FOUNDRY_ENV_VARS = (
    "FOUNDRY_SUBSCRIPTION_ID",
    "FOUNDRY_LOCATION",
    "FOUNDRY_BASE_NAME",
    "FOUNDRY_LOG",
)


@pytest.fixture(autouse=True)
def _clean_foundry_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove FOUNDRY_* env vars so unit tests don't leak deployment config."""
    for var in _FOUNDRY_ENV_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def make_config(tmp_path: Path) -> Callable[..., Config]:
    """Factory fixture: write YAML + optional .env, return loaded Config."""

    def _make(yaml_str: str, *, dotenv: str | None = None) -> Config:
        (tmp_path / "config.yaml").write_text(yaml_str)
        if dotenv is not None:
            (tmp_path / ".env").write_text(dotenv)
        return load(tmp_path / "config.yaml")

    return _make
