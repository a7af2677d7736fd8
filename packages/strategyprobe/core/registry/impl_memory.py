"""In-memory extension registry."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from strategyprobe.core.registry.models import CapabilityTag, ExtensionDescriptor

logger = logging.getLogger(__name__)


class InMemoryRegistry:
    """Extension registry held in memory.

    Preserves registration order per capability. Useful as the host side
    of an embedded probe and as a deterministic registry in tests.

    Example:
        >>> registry = InMemoryRegistry()
        >>> registry.register(PROVISIONER_STRATEGY, StandardStrategyImpl)
        >>> [d.simple_name for d in registry.list(PROVISIONER_STRATEGY)]
        ['StandardStrategyImpl']
    """

    def __init__(self) -> None:
        self._extensions: dict[CapabilityTag, list[ExtensionDescriptor]] = {}

    def register(
        self,
        capability: CapabilityTag,
        extension: ExtensionDescriptor | type | object,
        *,
        markers: tuple[str, ...] = (),
    ) -> ExtensionDescriptor:
        """Register an extension for a capability.

        Args:
            capability: Extension point the implementation belongs to.
            extension: A descriptor, an implementation class, or an instance.
            markers: Capability markers (ignored when a descriptor is given).

        Returns:
            The descriptor that was stored.
        """
        if isinstance(extension, ExtensionDescriptor):
            descriptor = extension
        elif isinstance(extension, type):
            descriptor = ExtensionDescriptor.from_class(extension, markers=markers)
        else:
            descriptor = ExtensionDescriptor.from_instance(extension, markers=markers)

        self._extensions.setdefault(capability, []).append(descriptor)
        logger.debug(
            "Registered extension '%s' for capability '%s'",
            descriptor.simple_name,
            capability,
        )
        return descriptor

    def list(self, capability: CapabilityTag) -> Sequence[ExtensionDescriptor]:
        return tuple(self._extensions.get(capability, ()))

    @property
    def capabilities(self) -> Sequence[CapabilityTag]:
        """Capabilities with at least one registration, sorted."""
        return sorted(self._extensions.keys())

    def __len__(self) -> int:
        return sum(len(v) for v in self._extensions.values())
