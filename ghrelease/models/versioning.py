"""Version models — semantic versions, release tags, and orderings."""

from __future__ import annotations

import functools
import re
from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator

_SEMVER_RE = re.compile(r"([0-9]+)\.([0-9]+)\.([0-9]+)", re.ASCII)
_DIGITS_RE = re.compile(r"[0-9]+", re.ASCII)


def normalize_component(digits: str) -> str:
    """Drop leading zeros from a digit run, keeping a lone ``"0"``."""
    return digits.lstrip("0") or "0"


def component_key(digits: str) -> tuple[int, str]:
    """Numeric sort key for a digit run of any length.

    With leading zeros removed a longer run is a larger number, and runs of
    equal length order lexically, so no ``int`` conversion is needed.
    """
    normalized = normalize_component(digits)
    return (len(normalized), normalized)


class Ordering(int, Enum):
    """Three-way comparison result.

    The integer values are the ``-1 / 0 / 1`` the release tooling prints.
    """

    LESS = -1
    EQUAL = 0
    GREATER = 1


class ErrorKind(str, Enum):
    """Why a release tag was rejected."""

    EMPTY_PARAMETER = "empty_parameter"
    MISSING_PREFIX = "missing_prefix"
    INVALID_VERSION_FORMAT = "invalid_version_format"


@functools.total_ordering
class SemanticVersion(BaseModel):
    """A ``MAJOR.MINOR.PATCH`` triple of non-negative integers.

    Components are held as decimal digit strings with leading zeros removed,
    so ``SemanticVersion.parse("01.02.03")`` equals ``SemanticVersion.parse("1.2.3")``
    and components of any length order numerically. Integers are accepted on
    construction.
    """

    model_config = ConfigDict(frozen=True)

    major: str
    minor: str
    patch: str

    @field_validator("major", "minor", "patch", mode="before")
    @classmethod
    def _normalize(cls, value: object) -> str:
        if isinstance(value, int) and not isinstance(value, bool):
            if value < 0:
                raise ValueError("version components must be non-negative")
            value = str(value)
        if not isinstance(value, str) or _DIGITS_RE.fullmatch(value) is None:
            raise ValueError(f"invalid version component: {value!r}")
        return normalize_component(value)

    @classmethod
    def parse(cls, text: str) -> SemanticVersion:
        """Parse a strict three-component version string.

        Raises ValueError when *text* is not three dot-separated digit runs.
        """
        match = _SEMVER_RE.fullmatch(text)
        if match is None:
            raise ValueError(f"invalid semantic version: {text!r}")
        major, minor, patch = match.groups()
        return cls(major=major, minor=minor, patch=patch)

    def sort_key(self) -> tuple[tuple[int, str], ...]:
        return tuple(component_key(c) for c in (self.major, self.minor, self.patch))

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self.sort_key() < other.sort_key()


class ReleaseTag(BaseModel):
    """A validated ``release-vMAJOR.MINOR.PATCH`` tag.

    ``raw`` keeps the tag exactly as supplied (leading zeros included) so it
    can be matched back against git or params tag lists.
    """

    model_config = ConfigDict(frozen=True)

    raw: str
    prefix: str = "release-v"
    version: SemanticVersion

    def __str__(self) -> str:
        return self.raw
