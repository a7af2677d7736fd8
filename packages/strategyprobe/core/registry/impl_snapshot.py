"""Registry backed by a recorded JSON/YAML listing.

File layout (YAML shown)::

    hudson.slaves.NodeProvisioner.Strategy:
      - simple_name: StandardStrategyImpl
        qualified_name: hudson.slaves.NodeProvisioner$StandardStrategyImpl
      - simple_name: NoDelayProvisionerStrategy
        qualified_name: hudson.plugins.ec2.NoDelayProvisionerStrategy
        markers: [no-delay]

A bare string entry is shorthand for ``{simple_name: <string>}``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from strategyprobe.core.registry.models import CapabilityTag, ExtensionDescriptor

logger = logging.getLogger(__name__)


class SnapshotRegistry:
    """Read-only registry populated from a recorded listing."""

    def __init__(self, listing: Mapping[CapabilityTag, Sequence[ExtensionDescriptor]]) -> None:
        self._listing = {cap: tuple(items) for cap, items in listing.items()}

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> SnapshotRegistry:
        """Build a registry from raw (already deserialized) data.

        Args:
            raw: Mapping of capability tag to a list of descriptor entries.

        Returns:
            SnapshotRegistry with validated descriptors.

        Raises:
            ValueError: If a capability's entries are not a list.
            ValidationError: If a descriptor entry is invalid.
        """
        listing: dict[CapabilityTag, list[ExtensionDescriptor]] = {}
        for capability, entries in raw.items():
            if entries is None:
                entries = []
            if not isinstance(entries, list):
                raise ValueError(
                    f"Entries for capability '{capability}' must be a list, "
                    f"got {type(entries).__name__}"
                )
            listing[str(capability)] = [
                ExtensionDescriptor(simple_name=e)
                if isinstance(e, str)
                else ExtensionDescriptor.model_validate(e)
                for e in entries
            ]
        return cls(listing)

    @classmethod
    def from_file(cls, path: str | Path) -> SnapshotRegistry:
        """Load a registry listing from a JSON or YAML file.

        Raises:
            FileNotFoundError: If the file does not exist.
            ValueError: If the file format or content is invalid.
        """
        # Import here to avoid circular dependency
        from strategyprobe.core.config.loader import load_config

        raw = load_config(path)
        registry = cls.from_mapping(raw)
        logger.debug("Loaded registry snapshot from %s (%d capabilities)", path, len(raw))
        return registry

    def list(self, capability: CapabilityTag) -> Sequence[ExtensionDescriptor]:
        return self._listing.get(capability, ())

    @property
    def capabilities(self) -> Sequence[CapabilityTag]:
        """Capabilities present in the listing, sorted."""
        return sorted(self._listing.keys())
