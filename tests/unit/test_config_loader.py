"""Tests for YAML configuration loading."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from foundry_bindings.config.loader import ConfigError, _resolve_deployment, load_config
from foundry_bindings.resources.binding import BindingVariant
from foundry_bindings.resources.category import Mode, ResourceCategory

if TYPE_CHECKING:
    from collections.abc import Callable

    from foundry_bindings.config.schema import Config

_FULL_YAML = """\
deployment:
  subscription_id: 00000000-0000-0000-0000-000000000000
  location: EastUS2
  base_name: aifoundry

mode: auto_provisioned
enable_diagnostic_settings: true
definitions:
  search_index:
    enable_diagnostic_settings: false
output_path: out/terraform.tfvars.json

ai_projects:
  project_1:
    name: project-1
    display_name: Project 1
    description: First
    create_project_connections: true
    storage_account_connection:
      new_resource_map_key: team_a
    key_vault_connection: {}
  project_2:
    name: project-2
    create_project_connections: false
"""


@pytest.fixture
def full_config(make_config: Callable[..., Config]) -> Config:
    return make_config(_FULL_YAML)


class TestLoadConfigFull:
    def test_deployment(self, full_config: Config) -> None:
        assert full_config.deployment.subscription_id == "00000000-0000-0000-0000-000000000000"
        assert full_config.deployment.location == "eastus2"
        assert full_config.deployment.base_name == "aifoundry"

    def test_mode_and_settings(self, full_config: Config) -> None:
        assert full_config.mode == Mode.AUTO_PROVISIONED
        assert full_config.settings.enable_diagnostic_settings is True
        override = full_config.definitions[ResourceCategory.SEARCH_INDEX]
        assert override.enable_diagnostic_settings is False

    def test_projects(self, full_config: Config) -> None:
        assert list(full_config.ai_projects) == ["project_1", "project_2"]
        p1 = full_config.ai_projects["project_1"]
        assert p1.display_name == "Project 1"
        assert p1.storage_account_connection is not None
        assert p1.storage_account_connection.new_resource_map_key == "team_a"
        assert p1.key_vault_connection is not None
        assert p1.key_vault_connection.declared_variant() is None
        assert p1.cosmos_db_connection is None

    def test_explicit_null_id_is_declared(self, make_config: Callable[..., Config]) -> None:
        config = make_config(
            "ai_projects:\n"
            "  p:\n"
            "    name: p\n"
            "    storage_account_connection:\n"
            "      existing_resource_id: null\n"
        )
        binding = config.ai_projects["p"].storage_account_connection
        assert binding is not None
        assert binding.declared_variant() == BindingVariant.EXISTING_REFERENCE

    def test_output_path_relative_to_config(self, full_config: Config) -> None:
        assert full_config.output_path == full_config.config_dir / "out/terraform.tfvars.json"

    def test_config_dir_set_to_parent(self, tmp_path: Path) -> None:
        f = tmp_path / "sub" / "config.yaml"
        f.parent.mkdir()
        f.write_text("ai_projects:\n")
        config = load_config(f)
        assert config.config_dir == f.parent
        assert config.ai_projects == {}
        assert "config_dir" not in config.model_dump()

    def test_empty_file(self, make_config: Callable[..., Config]) -> None:
        config = make_config("")
        assert config.mode is None
        assert config.ai_projects == {}
        assert config.output_path is None


class TestConfigErrors:
    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="Failed to read"):
            load_config(tmp_path / "missing.yaml")

    def test_not_a_mapping(self, make_config: Callable[..., Config]) -> None:
        with pytest.raises(ConfigError, match="mapping"):
            make_config("- a\n- b\n")

    def test_unknown_mode(self, make_config: Callable[..., Config]) -> None:
        with pytest.raises(ConfigError, match="mode"):
            make_config("mode: hybrid\n")

    def test_unknown_project_field(self, make_config: Callable[..., Config]) -> None:
        with pytest.raises(ConfigError, match="extra"):
            make_config("ai_projects:\n  p:\n    name: p\n    sku: basic\n")

    def test_unknown_category_override(self, make_config: Callable[..., Config]) -> None:
        with pytest.raises(ConfigError, match="definitions"):
            make_config("definitions:\n  queue:\n    enable_diagnostic_settings: true\n")

    def test_both_identity_fields(self, make_config: Callable[..., Config]) -> None:
        with pytest.raises(ConfigError, match="Only one of"):
            make_config(
                "ai_projects:\n"
                "  p:\n"
                "    name: p\n"
                "    ai_search_connection:\n"
                "      existing_resource_id: /x\n"
                "      new_resource_map_key: k\n"
            )

    def test_existing_id_with_empty_map_key(self, make_config: Callable[..., Config]) -> None:
        with pytest.raises(ConfigError, match="Only one of"):
            make_config(
                "ai_projects:\n"
                "  p1:\n"
                "    name: p1\n"
                "    create_project_connections: true\n"
                "    storage_account_connection:\n"
                "      existing_resource_id: /subscriptions/X/storageAccounts/byo\n"
                '      new_resource_map_key: ""\n'
            )

    def test_config_dir_not_settable(self, make_config: Callable[..., Config]) -> None:
        with pytest.raises(ConfigError, match="config_dir"):
            make_config("config_dir: /elsewhere\nai_projects:\n")

    def test_duplicate_project_names(self, make_config: Callable[..., Config]) -> None:
        with pytest.raises(ConfigError, match="Duplicate project name 'same'"):
            make_config("ai_projects:\n  a:\n    name: same\n  b:\n    name: same\n")

    def test_invalid_base_name(self, make_config: Callable[..., Config]) -> None:
        with pytest.raises(ConfigError, match="base_name"):
            make_config("deployment:\n  base_name: Not_Valid\n")

    def test_unknown_deployment_field(self, make_config: Callable[..., Config]) -> None:
        with pytest.raises(ConfigError, match="region"):
            make_config("deployment:\n  region: eastus\n")


class TestResolveDeployment:
    """Unit tests for _resolve_deployment priority chain (no YAML parsing)."""

    def test_yaml_value_wins(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FOUNDRY_LOCATION", "westeurope")
        result = _resolve_deployment({"location": "eastus"}, Path())
        assert result["location"] == "eastus"

    def test_env_var_fallback(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FOUNDRY_BASE_NAME", "from-env")
        result = _resolve_deployment({}, Path())
        assert result["base_name"] == "from-env"

    def test_dotenv_fallback(self, tmp_path: Path) -> None:
        (tmp_path / ".env").write_text("FOUNDRY_SUBSCRIPTION_ID=sub-from-dotenv\n")
        result = _resolve_deployment({}, tmp_path)
        assert result["subscription_id"] == "sub-from-dotenv"

    def test_env_beats_dotenv(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / ".env").write_text("FOUNDRY_LOCATION=from-dotenv\n")
        monkeypatch.setenv("FOUNDRY_LOCATION", "from-env")
        result = _resolve_deployment({}, tmp_path)
        assert result["location"] == "from-env"

    def test_unset_fields_omitted(self) -> None:
        assert _resolve_deployment({}, Path("/nonexistent")) == {}

    def test_dotenv_through_loader(self, make_config: Callable[..., Config]) -> None:
        config = make_config("ai_projects:\n", dotenv="FOUNDRY_LOCATION=NorthEurope\n")
        assert config.deployment.location == "northeurope"
