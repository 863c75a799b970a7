"""``ghrelease latest`` and ``ghrelease transition`` — pick releases from a tag list.

Tags are taken from the arguments or, when none are given, one per line
from stdin, e.g. ``git tag -l | ghrelease latest``.
"""

from __future__ import annotations

import typer

from ghrelease.cli._io import collect_tags, error, info, plain, warn
from ghrelease.config import config
from ghrelease.core.tag_selector import (
    NoReleaseTagsError,
    latest_release,
    latest_release_tag,
    release_transition,
)


def latest_cmd(
    tags: list[str] = typer.Argument(
        None,
        help="Candidate tags. Read from stdin when omitted.",
    ),
    version_only: bool = typer.Option(
        False,
        "--version-only",
        "-v",
        help="Print the bare version instead of the full tag.",
    ),
    prefix: str = typer.Option(
        None,
        "--prefix",
        help="Release tag prefix (defaults to GHRELEASE_RELEASE_PREFIX).",
    ),
) -> None:
    """Print the highest release tag."""
    prefix = prefix or config.release_prefix

    select = latest_release if version_only else latest_release_tag
    try:
        latest = select(collect_tags(tags), prefix)
    except NoReleaseTagsError:
        error("No release tags found. Make sure to fly the release pipeline.")
        raise typer.Exit(code=1)

    plain(latest)


def transition_cmd(
    tags: list[str] = typer.Argument(
        None,
        help="Candidate tags. Read from stdin when omitted.",
    ),
    require_upgrade: bool = typer.Option(
        False,
        "--require-upgrade",
        help="Fail unless the current release is newer than the previous one.",
    ),
    prefix: str = typer.Option(
        None,
        "--prefix",
        help="Release tag prefix (defaults to GHRELEASE_RELEASE_PREFIX).",
    ),
) -> None:
    """Print the previous and current release versions as ``FROM -> TO``."""
    prefix = prefix or config.release_prefix

    try:
        transition = release_transition(collect_tags(tags), prefix)
    except NoReleaseTagsError:
        error("No release tags found. Make sure to fly the release pipeline.")
        raise typer.Exit(code=1)

    if not transition.is_upgrade:
        if require_upgrade:
            error(
                f"Current release {transition.current} is not newer than "
                f"{transition.previous}"
            )
            raise typer.Exit(code=1)
        warn(f"No release newer than {transition.previous} found")
    else:
        info(
            f"Updating params from {transition.from_version} "
            f"to {transition.to_version}"
        )

    plain(f"{transition.from_version} -> {transition.to_version}")
