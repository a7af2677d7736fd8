"""Exception types raised by the strategy probe."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from strategyprobe.core.registry.models import ExtensionDescriptor


class ProbeError(Exception):
    """Base class for all probe errors."""

    pass


class ParseError(ProbeError, ValueError):
    """Raised when a host version string cannot be parsed.

    Callers evaluating version gates downgrade this to "gate not satisfied"
    instead of letting it abort a probe run.
    """

    def __init__(self, raw: str | None, reason: str) -> None:
        self.raw = raw
        self.reason = reason
        super().__init__(f"Cannot parse version {raw!r}: {reason}")


class MalformedRegistryError(ProbeError):
    """Raised when a registry snapshot is empty or structurally invalid.

    Distinct from a per-check failure: it means the registry itself is
    broken, not that a particular extension is missing.

    Attributes:
        capability: Capability tag that was queried.
        observed: The snapshot that failed validation.
    """

    def __init__(
        self,
        message: str,
        *,
        capability: str | None = None,
        observed: Sequence[ExtensionDescriptor] = (),
    ) -> None:
        self.capability = capability
        self.observed = tuple(observed)
        super().__init__(message)
