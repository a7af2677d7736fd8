"""Configuration loading utilities with JSON and YAML support."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

import yaml

from strategyprobe.core.config.models import ProbeConfig

logger = logging.getLogger(__name__)

HOST_VERSION_ENV = "STRATEGYPROBE_HOST_VERSION"

# Default probe config path (can be overridden)
_DEFAULT_PROBE_CONFIG_PATH = Path("strategyprobe.yaml")


def detect_format(file_path: Path | str) -> str:
    """Detect config file format from extension.

    Args:
        file_path: Path to config file

    Returns:
        Format string: "json" or "yaml"

    Raises:
        ValueError: If format cannot be determined

    Example:
        >>> detect_format("checks.json")
        'json'
        >>> detect_format("checks.yml")
        'yaml'
    """
    suffix = Path(file_path).suffix.lower()

    if suffix == ".json":
        return "json"
    elif suffix in [".yaml", ".yml"]:
        return "yaml"
    else:
        raise ValueError(f"Unsupported config format: {suffix}")


def load_config(path: str | Path) -> dict[str, Any]:
    """Load and return a raw configuration dictionary.

    Supports both JSON and YAML formats. Format is auto-detected
    from file extension.

    Args:
        path: Path to config file (.json, .yaml, or .yml)

    Returns:
        Raw configuration dictionary

    Raises:
        FileNotFoundError: If config file does not exist
        ValueError: If format is not supported or file content is invalid
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Config file does not exist: {path}")

    fmt = detect_format(path)

    if fmt == "json":
        try:
            with path.open("r", encoding="utf-8") as f:
                content = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e
    else:
        try:
            with path.open("r", encoding="utf-8") as f:
                content = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e
        # safe_load returns None for empty files
        if content is None:
            content = {}

    if not isinstance(content, dict):
        raise ValueError(f"Config in {path} must be a mapping, got {type(content).__name__}")
    return content


def load_probe_config(path: str | Path | None = None) -> ProbeConfig:
    """Load and validate probe configuration.

    A missing default config file yields all defaults; an explicitly given
    path must exist. The host version falls back to the
    ``STRATEGYPROBE_HOST_VERSION`` environment variable.

    Args:
        path: Path to config file (.json, .yaml, or .yml)
              Defaults to strategyprobe.yaml

    Returns:
        Validated ProbeConfig instance

    Raises:
        FileNotFoundError: If an explicit path does not exist
        ValidationError: If config is invalid
    """
    if path is None:
        path = _DEFAULT_PROBE_CONFIG_PATH
        config = (
            ProbeConfig.model_validate(load_config(path)) if path.exists() else ProbeConfig()
        )
    else:
        config = ProbeConfig.model_validate(load_config(path))

    _load_env_vars_into_config(config)
    return config


def _load_env_vars_into_config(config: ProbeConfig) -> None:
    """Fill unset values from the environment.

    This mutates the config object.

    Args:
        config: ProbeConfig instance to populate
    """
    if config.host_version is None:
        env_version = os.getenv(HOST_VERSION_ENV)
        if env_version:
            logger.debug(f"Loaded host version from {HOST_VERSION_ENV}")
            config.host_version = env_version
