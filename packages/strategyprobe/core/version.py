"""Host version parsing and version gates.

Versions look like ``2.530`` or ``2.530-SNAPSHOT``. Only the numeric
``(major, minor)`` core takes part in ordering; anything after the second
segment is kept as an informational qualifier.

Example:
    >>> v = parse_version("2.530-SNAPSHOT")
    >>> (v.major, v.minor, v.qualifier)
    (2, 530, 'SNAPSHOT')
    >>> v.is_at_least(2, 530)
    True
"""

from __future__ import annotations

import logging
import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from strategyprobe.core.errors import ParseError

logger = logging.getLogger(__name__)

_SEGMENT_SPLIT = re.compile(r"[.-]")
_NUMERIC = re.compile(r"[0-9]+")


class Version(BaseModel):
    """Parsed host version.

    Attributes:
        major: Major version number.
        minor: Minor version number.
        qualifier: Everything after the minor segment (e.g. ``SNAPSHOT``).
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    major: int = Field(ge=0, description="Major version number")
    minor: int = Field(ge=0, description="Minor version number")
    qualifier: str | None = Field(default=None, description="Informational suffix")

    @property
    def core(self) -> tuple[int, int]:
        """Numeric ordering key."""
        return (self.major, self.minor)

    def is_at_least(self, major: int, minor: int) -> bool:
        """Check whether this version is ``>= (major, minor)``.

        Args:
            major: Required major version.
            minor: Required minor version.

        Returns:
            True if ``(self.major, self.minor) >= (major, minor)``.
        """
        return self.core >= (major, minor)

    # Equality and hashing follow the ordering key; the qualifier is informational.
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.core == other.core

    def __hash__(self) -> int:
        return hash(self.core)

    def __lt__(self, other: Version) -> bool:
        return self.core < other.core

    def __le__(self, other: Version) -> bool:
        return self.core <= other.core

    def __gt__(self, other: Version) -> bool:
        return self.core > other.core

    def __ge__(self, other: Version) -> bool:
        return self.core >= other.core

    def __str__(self) -> str:
        base = f"{self.major}.{self.minor}"
        return f"{base}-{self.qualifier}" if self.qualifier else base


def parse_version(raw: str | None) -> Version:
    """Parse a dotted, optionally qualified version string.

    The string is split on ``.`` and ``-``. The first two segments must be
    non-negative integers; the remainder (if any) becomes the qualifier.

    Args:
        raw: Version string such as ``"2.530"`` or ``"2.530-SNAPSHOT"``.

    Returns:
        Parsed Version.

    Raises:
        ParseError: If the input is missing, has fewer than two segments,
            or either leading segment is not a non-negative integer.
    """
    if raw is None:
        raise ParseError(raw, "no version given")

    text = raw.strip()
    parts = _SEGMENT_SPLIT.split(text, maxsplit=2)
    if len(parts) < 2:
        raise ParseError(raw, "expected at least major and minor segments")

    major_text, minor_text = parts[0], parts[1]
    for name, segment in (("major", major_text), ("minor", minor_text)):
        if not _NUMERIC.fullmatch(segment):
            raise ParseError(raw, f"{name} segment {segment!r} is not a non-negative integer")

    qualifier = parts[2] if len(parts) > 2 and parts[2] else None
    return Version(major=int(major_text), minor=int(minor_text), qualifier=qualifier)


def try_parse_version(raw: str | None) -> Version | None:
    """Parse a version, returning None instead of raising.

    Unparseable or absent versions (development snapshots, unknown hosts)
    are a normal operating condition for a probe run.
    """
    try:
        return parse_version(raw)
    except ParseError as e:
        logger.debug("Host version treated as unknown: %s", e)
        return None


class VersionGate(BaseModel):
    """Minimum host version a check requires before it is evaluated.

    Accepts a version string shorthand when validated from config:

        >>> VersionGate.model_validate("2.530")
        VersionGate(major=2, minor=530)
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    major: int = Field(ge=0)
    minor: int = Field(ge=0)

    @model_validator(mode="before")
    @classmethod
    def _from_string(cls, data: Any) -> Any:
        if isinstance(data, float):
            raise ValueError(f"Version gate must be a quoted string, got number {data!r}")
        if isinstance(data, str):
            parsed = parse_version(data)
            return {"major": parsed.major, "minor": parsed.minor}
        return data

    @classmethod
    def at_least(cls, major: int, minor: int) -> VersionGate:
        """Build a gate satisfied by any host version ``>= major.minor``."""
        return cls(major=major, minor=minor)

    def is_satisfied_by(self, version: Version | None) -> bool:
        """Evaluate the gate; an unknown host version never satisfies it."""
        if version is None:
            return False
        return version.is_at_least(self.major, self.minor)

    def __str__(self) -> str:
        return f">={self.major}.{self.minor}"
