"""ghrelease: release tag validation and version ordering.

Pure helpers used by release pipelines before creating or deleting a GitHub
release:
  - validate ``release-vMAJOR.MINOR.PATCH`` tags
  - compare dotted numeric versions
  - strip the release prefix from a tag
  - pick the latest and previous release from a tag list
"""

__version__ = "0.1.0"
__description__ = "Release tag validation and version ordering for release pipelines"

from ghrelease.core.version_tag import (
    EmptyParameterError,
    InvalidVersionFormatError,
    MissingPrefixError,
    ReleaseTagError,
    compare_versions,
    extract_version,
    validate_release_param,
)
from ghrelease.models.versioning import ErrorKind, Ordering, ReleaseTag, SemanticVersion

__all__ = [
    "EmptyParameterError",
    "ErrorKind",
    "InvalidVersionFormatError",
    "MissingPrefixError",
    "Ordering",
    "ReleaseTag",
    "ReleaseTagError",
    "SemanticVersion",
    "compare_versions",
    "extract_version",
    "validate_release_param",
    "__version__",
]
