"""Configuration management for the strategy probe."""

from strategyprobe.core.config.loader import (
    HOST_VERSION_ENV,
    detect_format,
    load_config,
    load_probe_config,
)
from strategyprobe.core.config.models import LoggingConfig, ProbeConfig

__all__ = [
    # Loaders
    "HOST_VERSION_ENV",
    "detect_format",
    "load_config",
    "load_probe_config",
    # Models
    "LoggingConfig",
    "ProbeConfig",
]
