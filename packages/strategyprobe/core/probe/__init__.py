"""Probe checks, runner and results.

Example:
    >>> from strategyprobe.core.probe import ProbeRunner, default_checks
    >>> report = ProbeRunner().probe(registry, default_checks(), capability, "2.530")
    >>> for result in report.failed:
    ...     print(format_diagnostic(result))
"""

from strategyprobe.core.probe.checks import default_checks
from strategyprobe.core.probe.diagnostics import format_diagnostic
from strategyprobe.core.probe.models import Check, ProbeOutcome, ProbeReport, ProbeResult
from strategyprobe.core.probe.runner import ProbeRunner, validate_snapshot

__all__ = [
    "Check",
    "ProbeOutcome",
    "ProbeReport",
    "ProbeResult",
    "ProbeRunner",
    "default_checks",
    "format_diagnostic",
    "validate_snapshot",
]
