"""Extension descriptor model."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# Capability tags are plain strings naming an extension point.
CapabilityTag = str

PROVISIONER_STRATEGY: CapabilityTag = "hudson.slaves.NodeProvisioner.Strategy"


class ExtensionDescriptor(BaseModel):
    """Read-only snapshot of one registered extension.

    Attributes:
        simple_name: Short implementation name (e.g. ``StandardStrategyImpl``).
        qualified_name: Fully qualified implementation name.
        markers: Stable capability markers attached to the implementation.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    simple_name: str = Field(description="Short implementation name")
    qualified_name: str = Field(default="", description="Fully qualified implementation name")
    markers: tuple[str, ...] = Field(default=(), description="Stable capability markers")

    @classmethod
    def from_class(cls, impl: type, *, markers: tuple[str, ...] = ()) -> ExtensionDescriptor:
        """Describe an implementation class.

        Args:
            impl: Implementation class.
            markers: Optional capability markers.

        Returns:
            Descriptor using the class name and ``module.qualname``.
        """
        return cls(
            simple_name=impl.__name__,
            qualified_name=f"{impl.__module__}.{impl.__qualname__}",
            markers=markers,
        )

    @classmethod
    def from_instance(cls, obj: Any, *, markers: tuple[str, ...] = ()) -> ExtensionDescriptor:
        """Describe a registered extension instance by its class."""
        return cls.from_class(type(obj), markers=markers)

    def display_name(self) -> str:
        """Human-readable ``simple (qualified)`` form used in diagnostics."""
        if self.qualified_name and self.qualified_name != self.simple_name:
            return f"{self.simple_name} ({self.qualified_name})"
        return self.simple_name
