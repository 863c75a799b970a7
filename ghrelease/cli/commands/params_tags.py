"""``ghrelease params-tags REPO`` — list or check a repo's tags in the params repo.

Params tags are named ``<repo>-release-vX.Y.Z``. Pipe them in with
``git -C ~/git/params tag -l | ghrelease params-tags my-repo``.
"""

from __future__ import annotations

import typer

from ghrelease.cli._io import collect_tags, error, info, warn
from ghrelease.config import config
from ghrelease.core.tag_selector import is_known_tag, params_release_versions


def params_tags_cmd(
    repo: str = typer.Argument(..., help="Repository name the params tags belong to."),
    tags: list[str] = typer.Argument(
        None,
        help="Params repo tags. Read from stdin when omitted.",
    ),
    check: str = typer.Option(
        None,
        "--check",
        "-c",
        help="Exit 0 only if this exact tag exists in the params repo.",
    ),
) -> None:
    """List the release versions recorded for REPO in the params repo."""
    params_tags = collect_tags(tags)

    if check is not None:
        if is_known_tag(check, params_tags):
            return
        error(f"Tag {check} not found in the {config.params_repo} repo")
        raise typer.Exit(code=1)

    versions = params_release_versions(repo, params_tags)
    if not versions:
        warn(f"No params tags found for {repo}")
        return

    for version in versions:
        info(f"> {version}")
