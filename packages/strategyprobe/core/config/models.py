"""Configuration models for the strategy probe."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from strategyprobe.core.probe.checks import default_checks
from strategyprobe.core.probe.models import Check
from strategyprobe.core.registry.models import PROVISIONER_STRATEGY


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = Field(default=False, description="Emit JSON log lines")
    filename: str | None = Field(default=None, description="Log file (default: stdout)")


class ProbeConfig(BaseModel):
    """Probe run configuration.

    Example (YAML)::

        capability: hudson.slaves.NodeProvisioner.Strategy
        host_version: "2.530"
        min_extensions: 2
        checks:
          - label: standard-strategy
            policy: {kind: contains, substring: Standard}
          - label: node-delay-strategy
            policy: {kind: exact, name: NodeDelayProvisionerStrategy}
            gate: "2.530"
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    capability: str = Field(default=PROVISIONER_STRATEGY, min_length=1)
    host_version: str | None = Field(
        default=None, description="Host version string (None = read from environment)"
    )
    min_extensions: int = Field(default=1, ge=1, description="Minimum registered extensions")
    checks: list[Check] = Field(default_factory=default_checks)
    logging: LoggingConfig = LoggingConfig()

    @field_validator("host_version", mode="before")
    @classmethod
    def _reject_float_version(cls, value: Any) -> Any:
        # YAML reads an unquoted 2.530 as the float 2.53
        if isinstance(value, float):
            raise ValueError(
                f"host_version must be a quoted string (got number {value!r}); "
                f"write it as \"2.530\" in YAML"
            )
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value
