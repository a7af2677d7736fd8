"""Tests for probe config loading."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

import strategyprobe.core.config.loader as config_loader
from strategyprobe.core.config import HOST_VERSION_ENV, ProbeConfig, load_probe_config
from strategyprobe.core.matching import ContainsMatch, ExactMatch
from strategyprobe.core.registry.models import PROVISIONER_STRATEGY
from strategyprobe.core.version import VersionGate


@pytest.fixture
def sample_config_data() -> dict:
    """Sample probe configuration."""
    return {
        "capability": "custom.Capability",
        "host_version": "2.530-SNAPSHOT",
        "min_extensions": 2,
        "checks": [
            {"label": "standard", "policy": {"kind": "contains", "substring": "Standard"}},
            {
                "label": "node-delay",
                "policy": {"kind": "exact", "name": "NodeDelayProvisionerStrategy"},
                "gate": "2.530",
            },
        ],
        "logging": {"level": "INFO"},
    }


@pytest.fixture(autouse=True)
def _clear_host_version_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(HOST_VERSION_ENV, raising=False)


def test_detect_format() -> None:
    assert config_loader.detect_format("checks.json") == "json"
    assert config_loader.detect_format("checks.yaml") == "yaml"
    assert config_loader.detect_format(Path("checks.YML")) == "yaml"


def test_detect_format_invalid() -> None:
    with pytest.raises(ValueError, match="Unsupported config format"):
        config_loader.detect_format("checks.txt")


def test_load_config_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        config_loader.load_config(tmp_path / "missing.yaml")


def test_load_config_empty_yaml(tmp_path: Path) -> None:
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert config_loader.load_config(path) == {}


def test_load_config_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "bad.json"
    path.write_text("{not json")
    with pytest.raises(ValueError, match="Invalid JSON"):
        config_loader.load_config(path)


def test_load_config_invalid_yaml(tmp_path: Path) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text("checks: [unclosed")
    with pytest.raises(ValueError, match="Invalid YAML"):
        config_loader.load_config(path)


def test_load_config_non_mapping(tmp_path: Path) -> None:
    path = tmp_path / "list.yaml"
    path.write_text("- a\n- b\n")
    with pytest.raises(ValueError, match="must be a mapping"):
        config_loader.load_config(path)


def test_load_probe_config_yaml(tmp_path: Path, sample_config_data: dict) -> None:
    path = tmp_path / "probe.yaml"
    path.write_text(yaml.safe_dump(sample_config_data))

    config = load_probe_config(path)

    assert config.capability == "custom.Capability"
    assert config.host_version == "2.530-SNAPSHOT"
    assert config.min_extensions == 2
    assert config.checks[0].policy == ContainsMatch(substring="Standard")
    assert config.checks[1].policy == ExactMatch(name="NodeDelayProvisionerStrategy")
    assert config.checks[1].gate == VersionGate.at_least(2, 530)
    assert config.logging.level == "INFO"


def test_load_probe_config_json(tmp_path: Path, sample_config_data: dict) -> None:
    path = tmp_path / "probe.json"
    path.write_text(json.dumps(sample_config_data))
    assert load_probe_config(path).capability == "custom.Capability"


def test_defaults_when_default_file_missing(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.chdir(tmp_path)
    config = load_probe_config()
    assert config.capability == PROVISIONER_STRATEGY
    assert config.host_version is None
    assert [c.label for c in config.checks] == [
        "standard-strategy",
        "no-delay-strategy",
        "node-delay-strategy",
    ]


def test_explicit_missing_path_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_probe_config(tmp_path / "missing.yaml")


def test_host_version_from_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv(HOST_VERSION_ENV, "2.530")
    assert load_probe_config().host_version == "2.530"


def test_config_host_version_wins_over_env(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, sample_config_data: dict
) -> None:
    monkeypatch.setenv(HOST_VERSION_ENV, "1.0")
    path = tmp_path / "probe.yaml"
    path.write_text(yaml.safe_dump(sample_config_data))
    assert load_probe_config(path).host_version == "2.530-SNAPSHOT"


def test_unknown_field_rejected() -> None:
    with pytest.raises(ValidationError):
        ProbeConfig.model_validate({"capabilty": "typo"})


def test_invalid_log_level_rejected() -> None:
    with pytest.raises(ValidationError):
        ProbeConfig.model_validate({"logging": {"level": "LOUD"}})


def test_unquoted_yaml_host_version_rejected(tmp_path: Path) -> None:
    path = tmp_path / "probe.yaml"
    path.write_text("host_version: 2.530\n")
    with pytest.raises(ValidationError, match="quoted string"):
        load_probe_config(path)


def test_quoted_yaml_host_version_keeps_trailing_zero(tmp_path: Path) -> None:
    path = tmp_path / "probe.yaml"
    path.write_text('host_version: "2.530"\n')
    assert load_probe_config(path).host_version == "2.530"


def test_integer_host_version_becomes_string() -> None:
    assert ProbeConfig.model_validate({"host_version": 3}).host_version == "3"


def test_unquoted_yaml_gate_rejected(tmp_path: Path) -> None:
    path = tmp_path / "probe.yaml"
    path.write_text(
        "checks:\n"
        "  - label: node-delay\n"
        "    policy: {kind: exact, name: NodeDelayProvisionerStrategy}\n"
        "    gate: 2.530\n"
    )
    with pytest.raises(ValidationError, match="quoted string"):
        load_probe_config(path)


@pytest.mark.parametrize("value", [0, -3])
def test_assignment_is_validated(value: int) -> None:
    config = ProbeConfig()
    with pytest.raises(ValidationError):
        config.min_extensions = value
    assert config.min_extensions == 1
