"""``ghrelease validate TAG`` — check a release tag before creating or deleting a release."""

from __future__ import annotations

import logging

import typer

from ghrelease.cli._io import completed, error, info
from ghrelease.config import config
from ghrelease.core.version_tag import ReleaseTagError, parse_release_tag

logger = logging.getLogger(__name__)


def validate_cmd(
    tag: str = typer.Argument(
        "",
        help="Release tag to validate, e.g. release-v1.0.0.",
    ),
    prefix: str = typer.Option(
        None,
        "--prefix",
        help="Required tag prefix (defaults to GHRELEASE_RELEASE_PREFIX).",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only set the exit code.",
    ),
) -> None:
    """Validate a release tag of the form <prefix>MAJOR.MINOR.PATCH.

    Exits 0 when the tag is valid and 1 otherwise.
    """
    prefix = prefix or config.release_prefix

    try:
        release_tag = parse_release_tag(tag, prefix)
    except ReleaseTagError as exc:
        logger.debug("Rejected %r (%s)", tag, exc.kind.value)
        if not quiet:
            error(f"Error: {exc}")
            info(f"Example: {prefix}{config.example_version}")
        raise typer.Exit(code=1)

    if not quiet:
        version = release_tag.version
        completed(f"Valid release parameter: {release_tag}")
        info(
            f"Version breakdown: Major={version.major}, "
            f"Minor={version.minor}, Patch={version.patch}"
        )
