"""Extension registry access.

The host owns the registry; the probe sees it through the
ExtensionRegistryClient protocol.
"""

from strategyprobe.core.registry.impl_memory import InMemoryRegistry
from strategyprobe.core.registry.impl_snapshot import SnapshotRegistry
from strategyprobe.core.registry.models import (
    PROVISIONER_STRATEGY,
    CapabilityTag,
    ExtensionDescriptor,
)
from strategyprobe.core.registry.protocol import ExtensionRegistryClient

__all__ = [
    "PROVISIONER_STRATEGY",
    "CapabilityTag",
    "ExtensionDescriptor",
    "ExtensionRegistryClient",
    "InMemoryRegistry",
    "SnapshotRegistry",
]
