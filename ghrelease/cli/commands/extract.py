"""``ghrelease extract TAG`` — print the bare version of a release tag."""

from __future__ import annotations

import typer

from ghrelease.cli._io import plain
from ghrelease.config import config
from ghrelease.core.version_tag import extract_version


def extract_cmd(
    tag: str = typer.Argument(..., help="Release tag, e.g. release-v1.2.3."),
    prefix: str = typer.Option(
        None,
        "--prefix",
        help="Prefix to strip (defaults to GHRELEASE_RELEASE_PREFIX).",
    ),
) -> None:
    """Strip the release prefix from a tag. The tag is not validated."""
    plain(extract_version(tag, prefix or config.release_prefix))
