"""ghrelease data models — all Pydantic v2, all frozen (immutable)."""

from ghrelease.models.versioning import (
    ErrorKind,
    Ordering,
    ReleaseTag,
    SemanticVersion,
)

__all__ = [
    "ErrorKind",
    "Ordering",
    "ReleaseTag",
    "SemanticVersion",
]
