"""Match policies for locating extensions in a registry snapshot.

Baseline extensions are matched loosely (``ContainsMatch``) since their exact
implementation name is not a contract. A specific extension whose presence is
the fact under test is matched exactly (``ExactMatch``). ``MarkerMatch``
identifies an implementation by a stable marker instead of its name.

Matching is case-sensitive, deterministic and order-preserving.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from strategyprobe.core.registry.models import ExtensionDescriptor


class ExactMatch(BaseModel):
    """Match descriptors whose simple name equals ``name``."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["exact"] = "exact"
    name: str = Field(min_length=1)

    def matches(self, descriptor: ExtensionDescriptor) -> bool:
        return descriptor.simple_name == self.name

    def describe(self) -> str:
        return f"simple name == {self.name!r}"


class ContainsMatch(BaseModel):
    """Match descriptors whose simple name contains ``substring``."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["contains"] = "contains"
    substring: str = Field(min_length=1)

    def matches(self, descriptor: ExtensionDescriptor) -> bool:
        return self.substring in descriptor.simple_name

    def describe(self) -> str:
        return f"simple name contains {self.substring!r}"


class MarkerMatch(BaseModel):
    """Match descriptors carrying ``marker`` among their capability markers."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["marker"] = "marker"
    marker: str = Field(min_length=1)

    def matches(self, descriptor: ExtensionDescriptor) -> bool:
        return self.marker in descriptor.markers

    def describe(self) -> str:
        return f"marker {self.marker!r}"


MatchPolicy = Annotated[ExactMatch | ContainsMatch | MarkerMatch, Field(discriminator="kind")]


def find(
    descriptors: Iterable[ExtensionDescriptor], policy: MatchPolicy
) -> ExtensionDescriptor | None:
    """Return the first descriptor satisfying ``policy``, in registry order."""
    return next((d for d in descriptors if policy.matches(d)), None)


def find_all(
    descriptors: Iterable[ExtensionDescriptor], policy: MatchPolicy
) -> list[ExtensionDescriptor]:
    """Return every descriptor satisfying ``policy``, in registry order."""
    return [d for d in descriptors if policy.matches(d)]
