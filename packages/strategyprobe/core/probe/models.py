"""Check definitions and result types for probe runs.

Results are immutable and produced once per check per run.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from strategyprobe.core.matching import MatchPolicy
from strategyprobe.core.registry.models import ExtensionDescriptor
from strategyprobe.core.version import Version, VersionGate


class ProbeOutcome(str, Enum):
    """Classification of a single check.

    Values:
        PASS: A matching extension was found
        FAIL: The check applied but no extension matched
        SKIP: The version gate was not satisfied, nothing was matched
    """

    PASS = "pass"
    FAIL = "fail"
    SKIP = "skip"


class Check(BaseModel):
    """A named requirement on the registry.

    Without a gate the check always applies and fails when nothing matches.
    With a gate it is skipped unless the host version satisfies the gate.

    Attributes:
        label: Human-readable check name.
        policy: How the required extension is identified.
        gate: Optional minimum host version.
        description: Optional free-form description.

    Example:
        >>> Check(
        ...     label="node-delay-strategy",
        ...     policy=ExactMatch(name="NodeDelayProvisionerStrategy"),
        ...     gate=VersionGate.at_least(2, 530),
        ... )
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    label: str = Field(min_length=1, description="Check name")
    policy: MatchPolicy = Field(description="Match policy")
    gate: VersionGate | None = Field(default=None, description="Minimum host version")
    description: str | None = Field(default=None, description="Optional description")


class ProbeResult(BaseModel):
    """Outcome of one check in one probe run.

    Attributes:
        label: Label of the check.
        outcome: PASS, FAIL or SKIP.
        matched: The matching extension (PASS only).
        observed: Full registry snapshot (FAIL only), for diagnostics.
        expected: Description of what the check looked for.
        reason: Why the check was skipped (SKIP only).
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    label: str
    outcome: ProbeOutcome
    matched: ExtensionDescriptor | None = None
    observed: tuple[ExtensionDescriptor, ...] = ()
    expected: str = ""
    reason: str | None = None

    @property
    def is_failure(self) -> bool:
        return self.outcome is ProbeOutcome.FAIL


class ProbeReport(BaseModel):
    """Aggregate result of one probe run.

    Attributes:
        capability: Capability tag that was queried.
        raw_host_version: Host version string as supplied.
        host_version: Parsed host version, or None if absent/unparseable.
        observed: Registry snapshot every check was evaluated against.
        results: One result per check, in check order.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    capability: str
    raw_host_version: str | None = None
    host_version: Version | None = None
    observed: tuple[ExtensionDescriptor, ...] = ()
    results: tuple[ProbeResult, ...] = ()

    @property
    def passed(self) -> list[ProbeResult]:
        return [r for r in self.results if r.outcome is ProbeOutcome.PASS]

    @property
    def failed(self) -> list[ProbeResult]:
        return [r for r in self.results if r.is_failure]

    @property
    def skipped(self) -> list[ProbeResult]:
        return [r for r in self.results if r.outcome is ProbeOutcome.SKIP]

    @property
    def success(self) -> bool:
        """True unless some check failed. Skips never count as failures."""
        return not self.failed

    @property
    def exit_code(self) -> int:
        return 0 if self.success else 1

    def get_result(self, label: str) -> ProbeResult:
        """Get the result for a check label.

        Raises:
            KeyError: If no check with that label ran.
        """
        for result in self.results:
            if result.label == label:
                return result
        raise KeyError(f"Check '{label}' not found in results")
