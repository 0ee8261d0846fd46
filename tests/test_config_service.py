"""Tests for configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from deploy_planner.api import ConfigError
from deploy_planner.constants import ComponentOption, ResidualPolicy
from deploy_planner.models import PairingConfig, PlannerConfig
from deploy_planner.services import ConfigService


def test_missing_file_gives_defaults(tmp_path: Path) -> None:
    config = ConfigService(tmp_path / "absent.yaml").config

    assert config.pairing.test_type == "ApexClass"
    assert config.pairing.similarity_threshold == 50
    assert config.residual_policy == ResidualPolicy.REPORT
    assert config.manifest.indent == "    "


def test_file_values_override_defaults(tmp_path: Path) -> None:
    path = tmp_path / "planner.yaml"
    path.write_text(
        "residual_policy: force\n"
        "component_option: unmanaged\n"
        "pairing:\n"
        "  similarity_threshold: 70\n"
        "manifest:\n"
        "  indent: 2\n"
        "  xml_declaration: true\n",
        encoding="utf-8",
    )

    config = ConfigService(path).load_config()

    assert config.residual_policy == ResidualPolicy.FORCE
    assert config.component_option == ComponentOption.UNMANAGED
    assert config.pairing.similarity_threshold == 70
    assert config.manifest.indent == "  "
    assert config.manifest.xml_declaration is True


def test_flat_pairing_keys_are_accepted() -> None:
    config = PlannerConfig.from_dict({"test_type": "LightningComponentBundle"})

    assert config.pairing.test_type == "LightningComponentBundle"


def test_environment_variables_are_expanded(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("PLANNER_TEST_TYPE", "ApexTrigger")
    path = tmp_path / "planner.yaml"
    path.write_text("test_type: ${PLANNER_TEST_TYPE}\n", encoding="utf-8")

    assert ConfigService(path).config.pairing.test_type == "ApexTrigger"


def test_config_path_from_environment(tmp_path: Path, monkeypatch) -> None:
    path = tmp_path / "elsewhere.yaml"
    path.write_text("residual_policy: fail\n", encoding="utf-8")
    monkeypatch.setenv("DEPLOY_PLANNER_CONFIG", str(path))

    service = ConfigService()

    assert service.config_path == path
    assert service.config.residual_policy == ResidualPolicy.FAIL


def test_default_path_is_in_working_directory(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.delenv("DEPLOY_PLANNER_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)

    assert ConfigService().config_path == tmp_path / ".deploy-planner.yaml"


@pytest.mark.parametrize(
    "content",
    [
        "residual_policy: [unclosed\n",
        "- just\n- a list\n",
        "residual_policy: sometimes\n",
        "component_option: everything\n",
        "similarity_threshold: 150\n",
        "test_name_pattern: '('\n",
    ],
)
def test_invalid_configuration_raises(tmp_path: Path, content: str) -> None:
    path = tmp_path / "planner.yaml"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ConfigError):
        ConfigService(path).load_config()


def test_dump_config_round_trips(tmp_path: Path) -> None:
    service = ConfigService(tmp_path / "absent.yaml")

    data = yaml.safe_load(service.dump_config())

    assert data["residual_policy"] == "report"
    assert data["pairing"]["test_strip_pattern"] == "_?(unit)?test$"
    assert PlannerConfig.from_dict(data) == service.config


def test_subject_name_strips_only_the_trailing_token() -> None:
    pairing = PairingConfig()

    assert pairing.subject_name("TestDataFactoryTest") == "TestDataFactory"
    assert pairing.subject_name("Order_UnitTest") == "Order"
    assert pairing.is_test("ApexClass", "ordertest")
    assert not pairing.is_test("ApexClass", "TestOrder")
