"""Protocol for querying registered extensions."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from strategyprobe.core.registry.models import CapabilityTag, ExtensionDescriptor


@runtime_checkable
class ExtensionRegistryClient(Protocol):
    """Read-only view onto a host's extension registry.

    The host owns and populates the registry; the probe only queries it.
    Implementations must not have side effects, and an empty result is a
    valid answer (interpreting emptiness is the runner's job).
    """

    def list(self, capability: CapabilityTag) -> Sequence[ExtensionDescriptor]:
        """List extensions currently registered for a capability.

        Args:
            capability: Extension point to query.

        Returns:
            Descriptors in registry order.
        """
        ...
