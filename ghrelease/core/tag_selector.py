"""Tag selection over caller-supplied tag lists.

Picks the latest release, the previous/current release pair used when
bumping ``git_release_tag`` in a params repo, and the params tags that
belong to a given repository. Tag lists come from the caller; nothing here
talks to git.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict

from ghrelease.core.version_tag import (
    RELEASE_PREFIX,
    ReleaseTagError,
    compare_versions,
    extract_version,
    validate_release_param,
)
from ghrelease.models.versioning import Ordering

logger = logging.getLogger(__name__)


class NoReleaseTagsError(LookupError):
    """Raised when a tag list holds no valid release tags."""


class ReleaseTransition(BaseModel):
    """The previous and current release tags of a repository."""

    model_config = ConfigDict(frozen=True)

    previous: str
    current: str
    prefix: str = RELEASE_PREFIX

    @property
    def from_version(self) -> str:
        return f"v{extract_version(self.previous, self.prefix)}"

    @property
    def to_version(self) -> str:
        return f"v{extract_version(self.current, self.prefix)}"

    @property
    def is_upgrade(self) -> bool:
        """Whether the current release is strictly newer than the previous one."""
        ordering = compare_versions(
            extract_version(self.current, self.prefix),
            extract_version(self.previous, self.prefix),
        )
        return ordering is Ordering.GREATER


def release_tags(tags: Iterable[str], prefix: str = RELEASE_PREFIX) -> list[str]:
    """Return the valid release tags in *tags*, oldest first.

    Invalid tags are skipped. Tags with equal versions keep their input order.
    """
    valid: list[str] = []
    for tag in tags:
        tag = tag.strip()
        if not tag:
            continue
        try:
            validate_release_param(tag, prefix)
        except ReleaseTagError as exc:
            logger.debug("Skipping tag %r: %s", tag, exc)
            continue
        valid.append(tag)

    def _cmp(left: str, right: str) -> int:
        return compare_versions(
            extract_version(left, prefix), extract_version(right, prefix)
        ).value

    return sorted(valid, key=functools.cmp_to_key(_cmp))


def latest_release_tag(tags: Iterable[str], prefix: str = RELEASE_PREFIX) -> str:
    """Return the highest release tag.

    Raises NoReleaseTagsError if *tags* holds none.
    """
    ordered = release_tags(tags, prefix)
    if not ordered:
        raise NoReleaseTagsError("No release tags found")
    return ordered[-1]


def latest_release(tags: Iterable[str], prefix: str = RELEASE_PREFIX) -> str:
    """Return the bare version of the highest release tag."""
    return extract_version(latest_release_tag(tags, prefix), prefix)


def release_transition(
    tags: Iterable[str], prefix: str = RELEASE_PREFIX
) -> ReleaseTransition:
    """Return the two highest release tags as a ``ReleaseTransition``.

    With a single release tag, previous and current are the same tag.
    """
    ordered = release_tags(tags, prefix)
    if not ordered:
        raise NoReleaseTagsError("No release tags found")
    last_two = ordered[-2:]
    transition = ReleaseTransition(
        previous=last_two[0], current=last_two[-1], prefix=prefix
    )
    logger.info(
        "Release transition %s -> %s",
        transition.from_version,
        transition.to_version,
    )
    return transition


def is_known_tag(tag: str, known_tags: Iterable[str]) -> bool:
    """Whether *tag* appears verbatim in *known_tags*."""
    return any(tag == known.strip() for known in known_tags)


def params_release_versions(repo: str, params_tags: Iterable[str]) -> list[str]:
    """Return the params tags of *repo* with the ``<repo>-`` part removed.

    ``foo-release-v1.2.3`` becomes ``release-v1.2.3`` for repo ``foo``.
    Input order is preserved.
    """
    marker = f"{repo}-"
    versions: list[str] = []
    for tag in params_tags:
        tag = tag.strip()
        if not tag.startswith(repo):
            continue
        _, found, remainder = tag.rpartition(marker)
        versions.append(remainder if found else tag)
    return versions
