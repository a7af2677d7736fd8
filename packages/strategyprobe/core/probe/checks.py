"""Built-in provisioning strategy checks.

Two historical probes checked the same capability with different
semantics: one failed hard when a strategy was missing, the other only
reported it. Here the choice is explicit per check. A check without a gate
fails when its strategy is absent; a gated check is skipped on hosts older
than the gate.
"""

from __future__ import annotations

from strategyprobe.core.matching import ContainsMatch, ExactMatch
from strategyprobe.core.probe.models import Check
from strategyprobe.core.version import VersionGate

STANDARD_STRATEGY = "standard-strategy"
NO_DELAY_STRATEGY = "no-delay-strategy"
NODE_DELAY_STRATEGY = "node-delay-strategy"

# First host release expected to ship NodeDelayProvisionerStrategy.
NODE_DELAY_MIN_VERSION = (2, 530)


def default_checks() -> list[Check]:
    """Return the built-in provisioning strategy checks."""
    return [
        Check(
            label=STANDARD_STRATEGY,
            policy=ContainsMatch(substring="Standard"),
            description="Baseline provisioner strategy",
        ),
        Check(
            label=NO_DELAY_STRATEGY,
            policy=ExactMatch(name="NoDelayProvisionerStrategy"),
            description="No-delay provisioner strategy",
        ),
        Check(
            label=NODE_DELAY_STRATEGY,
            policy=ExactMatch(name="NodeDelayProvisionerStrategy"),
            gate=VersionGate.at_least(*NODE_DELAY_MIN_VERSION),
            description="Node-delay provisioner strategy from the host core",
        ),
    ]
