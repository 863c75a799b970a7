"""``ghrelease compare A B`` — order two dotted versions.

Prints ``1`` when A is newer, ``-1`` when B is newer and ``0`` when they
are equal, so shell callers can branch on the output.
"""

from __future__ import annotations

import typer

from ghrelease.cli._io import error, plain
from ghrelease.core.version_tag import ReleaseTagError, compare_versions


def compare_cmd(
    first: str = typer.Argument(..., help="First version, e.g. 1.2.3."),
    second: str = typer.Argument(..., help="Second version, e.g. 1.10.0."),
) -> None:
    """Compare two dotted numeric versions component by component."""
    try:
        ordering = compare_versions(first, second)
    except ReleaseTagError as exc:
        error(f"Error: {exc}")
        raise typer.Exit(code=1)

    plain(str(ordering.value))
