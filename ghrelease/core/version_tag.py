"""Release-tag validation and dotted version comparison.

Two separate rules live here and must not be mixed up:

- ``validate_release_param`` accepts exactly ``<prefix>MAJOR.MINOR.PATCH``.
- ``compare_versions`` orders dotted numeric versions of any length.

Nothing in this module logs or exits; every failure is raised to the caller
as a ``ReleaseTagError`` subclass.
"""

from __future__ import annotations

import re

from ghrelease.models.versioning import (
    ErrorKind,
    Ordering,
    ReleaseTag,
    SemanticVersion,
    component_key,
    normalize_component,
)

RELEASE_PREFIX = "release-v"

_RELEASE_VERSION_RE = re.compile(r"[0-9]+\.[0-9]+\.[0-9]+", re.ASCII)
_COMPONENT_RE = re.compile(r"[0-9]+", re.ASCII)


class ReleaseTagError(ValueError):
    """Base class for rejected release tags and version strings."""

    kind: ErrorKind

    def __init__(self, message: str, param: str) -> None:
        super().__init__(message)
        self.param = param


class EmptyParameterError(ReleaseTagError):
    """Raised when the release parameter is empty."""

    kind = ErrorKind.EMPTY_PARAMETER


class MissingPrefixError(ReleaseTagError):
    """Raised when the release parameter lacks the release prefix."""

    kind = ErrorKind.MISSING_PREFIX


class InvalidVersionFormatError(ReleaseTagError):
    """Raised when a version is not made of dot-separated digit runs."""

    kind = ErrorKind.INVALID_VERSION_FORMAT


def validate_release_param(param: str, prefix: str = RELEASE_PREFIX) -> None:
    """Check that *param* is ``<prefix>MAJOR.MINOR.PATCH``.

    Returns None when valid. The prefix match is case-sensitive and anchored
    at the start; the remainder must be exactly three digit runs.
    """
    if not param:
        raise EmptyParameterError("Parameter is required", param)

    if not param.startswith(prefix):
        raise MissingPrefixError(
            f"Parameter must start with '{prefix}'", param
        )

    version_part = param[len(prefix):]
    if _RELEASE_VERSION_RE.fullmatch(version_part) is None:
        raise InvalidVersionFormatError(
            f"Invalid semantic version format after '{prefix}'; "
            "the version must follow the MAJOR.MINOR.PATCH format",
            param,
        )


def parse_release_tag(param: str, prefix: str = RELEASE_PREFIX) -> ReleaseTag:
    """Validate *param* and return it as a ``ReleaseTag``."""
    validate_release_param(param, prefix)
    version = SemanticVersion.parse(param[len(prefix):])
    return ReleaseTag(raw=param, prefix=prefix, version=version)


def parse_version(text: str) -> tuple[str, ...]:
    """Split a dotted version into digit runs with leading zeros removed.

    Any empty or non-digit component raises ``InvalidVersionFormatError``.
    """
    components = text.split(".")
    for component in components:
        if _COMPONENT_RE.fullmatch(component) is None:
            raise InvalidVersionFormatError(
                f"Invalid version component {component!r} in {text!r}", text
            )
    return tuple(normalize_component(component) for component in components)


def compare_versions(a: str, b: str) -> Ordering:
    """Order two dotted numeric versions.

    Components are compared pairwise by numeric value, whatever their length.
    When every shared component is equal the version with more components is
    GREATER, so ``"1.2"`` sorts below ``"1.2.0"``.
    """
    left = [component_key(component) for component in parse_version(a)]
    right = [component_key(component) for component in parse_version(b)]

    for lhs, rhs in zip(left, right):
        if lhs > rhs:
            return Ordering.GREATER
        if lhs < rhs:
            return Ordering.LESS

    if len(left) > len(right):
        return Ordering.GREATER
    if len(left) < len(right):
        return Ordering.LESS
    return Ordering.EQUAL


def extract_version(tag: str, prefix: str = RELEASE_PREFIX) -> str:
    """Return whatever follows the last occurrence of *prefix* in *tag*.

    A tag without the prefix is returned unchanged. No validation is done.
    """
    if not prefix:
        return tag
    _, found, remainder = tag.rpartition(prefix)
    return remainder if found else tag
