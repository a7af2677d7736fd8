"""Human-readable diagnostics for probe results."""

from __future__ import annotations

from strategyprobe.core.probe.models import ProbeOutcome, ProbeResult


def format_diagnostic(result: ProbeResult) -> str:
    """Render a result as expected-vs-observed text.

    Args:
        result: Result to describe.

    Returns:
        Multi-line text. Failing results list every observed extension.
    """
    if result.outcome is ProbeOutcome.PASS:
        name = result.matched.display_name() if result.matched else "?"
        return f"{result.label}: found {name}"

    if result.outcome is ProbeOutcome.SKIP:
        return f"{result.label}: skipped ({result.reason or 'gate not satisfied'})"

    lines = [
        f"{result.label}: expected an extension with {result.expected}, none found.",
        f"Available extensions ({len(result.observed)}):",
    ]
    lines.extend(f"  - {d.display_name()}" for d in result.observed)
    return "\n".join(lines)
