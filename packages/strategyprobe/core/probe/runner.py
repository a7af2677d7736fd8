"""Probe runner.

Takes one registry snapshot, evaluates every check against it and
classifies each as pass, fail or skip. Stateless and re-entrant: the same
runner can be used for any number of runs.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from strategyprobe.core.errors import MalformedRegistryError
from strategyprobe.core.matching import find
from strategyprobe.core.probe.models import Check, ProbeOutcome, ProbeReport, ProbeResult
from strategyprobe.core.registry.models import CapabilityTag, ExtensionDescriptor
from strategyprobe.core.registry.protocol import ExtensionRegistryClient
from strategyprobe.core.utils.logging import get_logger
from strategyprobe.core.version import Version, try_parse_version

logger = logging.getLogger(__name__)


def validate_snapshot(
    registry_view: Sequence[ExtensionDescriptor] | None,
    *,
    capability: CapabilityTag | None = None,
    min_extensions: int = 1,
) -> None:
    """Check that a registry snapshot is structurally usable.

    Args:
        registry_view: Snapshot to validate.
        capability: Capability the snapshot was taken for (for messages).
        min_extensions: Minimum number of registered extensions.

    Raises:
        MalformedRegistryError: If the snapshot is missing, smaller than
            ``min_extensions``, empty, or has a descriptor without a simple name.
    """
    where = f" for capability '{capability}'" if capability else ""
    if registry_view is None:
        raise MalformedRegistryError(f"Registry returned no listing{where}", capability=capability)

    if not registry_view:
        raise MalformedRegistryError(
            f"Registry listing is empty{where}", capability=capability, observed=registry_view
        )

    if len(registry_view) < min_extensions:
        raise MalformedRegistryError(
            f"Expected at least {min_extensions} registered extensions{where}, "
            f"found {len(registry_view)}",
            capability=capability,
            observed=registry_view,
        )

    for index, descriptor in enumerate(registry_view):
        if descriptor is None or not descriptor.simple_name:
            raise MalformedRegistryError(
                f"Registry entry {index}{where} has no simple name",
                capability=capability,
                observed=[d for d in registry_view if d is not None],
            )


class ProbeRunner:
    """Evaluates checks against a registry snapshot.

    Example:
        >>> runner = ProbeRunner()
        >>> report = runner.probe(
        ...     client=registry,
        ...     checks=default_checks(),
        ...     capability=PROVISIONER_STRATEGY,
        ...     raw_version="2.530-SNAPSHOT",
        ... )
        >>> report.success
        True
    """

    def __init__(self, *, min_extensions: int = 1) -> None:
        """Initialize runner.

        Args:
            min_extensions: Minimum snapshot size accepted as well-formed.
        """
        if min_extensions < 1:
            raise ValueError(f"min_extensions must be >= 1, got {min_extensions}")
        self.min_extensions = min_extensions

    def run(
        self,
        checks: Sequence[Check],
        registry_view: Sequence[ExtensionDescriptor],
        host_version: Version | None,
        *,
        capability: CapabilityTag | None = None,
    ) -> list[ProbeResult]:
        """Evaluate checks against a snapshot.

        Every check is evaluated; a failing check never stops the others.

        Args:
            checks: Checks to evaluate.
            registry_view: Registry snapshot.
            host_version: Parsed host version, or None if unknown.
            capability: Capability the snapshot belongs to (for messages).

        Returns:
            One ProbeResult per check, in check order.

        Raises:
            MalformedRegistryError: If the snapshot is structurally invalid.
        """
        validate_snapshot(
            registry_view, capability=capability, min_extensions=self.min_extensions
        )
        snapshot = tuple(registry_view)
        return [self._evaluate(check, snapshot, host_version) for check in checks]

    def probe(
        self,
        client: ExtensionRegistryClient,
        checks: Sequence[Check],
        capability: CapabilityTag,
        raw_version: str | None,
    ) -> ProbeReport:
        """Run a full probe against a registry client.

        Queries the client exactly once so all checks see one consistent
        snapshot. An unparseable host version is treated as unknown.

        Args:
            client: Registry to query.
            checks: Checks to evaluate.
            capability: Extension point to query.
            raw_version: Host version string (may be None).

        Returns:
            ProbeReport for the run.

        Raises:
            MalformedRegistryError: If the snapshot is structurally invalid.
        """
        run_logger = get_logger(__name__, capability=capability)
        host_version = try_parse_version(raw_version)
        registry_view = client.list(capability)
        run_logger.debug(
            "Probing capability '%s' (host version %s, %d extensions, %d checks)",
            capability,
            host_version or "unknown",
            len(registry_view) if registry_view is not None else 0,
            len(checks),
        )

        try:
            results = self.run(checks, registry_view, host_version, capability=capability)
        except MalformedRegistryError as e:
            run_logger.error("Malformed registry: %s", e)
            raise

        return ProbeReport(
            capability=capability,
            raw_host_version=raw_version,
            host_version=host_version,
            observed=tuple(registry_view),
            results=tuple(results),
        )

    def _evaluate(
        self,
        check: Check,
        snapshot: tuple[ExtensionDescriptor, ...],
        host_version: Version | None,
    ) -> ProbeResult:
        expected = check.policy.describe()

        if check.gate is not None and not check.gate.is_satisfied_by(host_version):
            reason = f"host version {host_version or 'unknown'} does not satisfy {check.gate}"
            logger.info("- %s skipped: %s", check.label, reason)
            return ProbeResult(
                label=check.label,
                outcome=ProbeOutcome.SKIP,
                expected=expected,
                reason=reason,
            )

        logger.debug("Evaluating check '%s' (%s)", check.label, expected)
        matched = find(snapshot, check.policy)

        if matched is not None:
            logger.info("✓ %s: found %s", check.label, matched.simple_name)
            return ProbeResult(
                label=check.label,
                outcome=ProbeOutcome.PASS,
                matched=matched,
                expected=expected,
            )

        logger.warning(
            "✗ %s: no extension with %s; available: %s",
            check.label,
            expected,
            ", ".join(d.simple_name for d in snapshot),
        )
        return ProbeResult(
            label=check.label,
            outcome=ProbeOutcome.FAIL,
            observed=snapshot,
            expected=expected,
        )
