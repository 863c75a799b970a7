"""Main Typer application — imports and registers all CLI commands.

Entry point: ``ghrelease`` (configured via pyproject.toml scripts).
"""

from __future__ import annotations

import logging

import typer

from ghrelease.cli.commands.compare import compare_cmd
from ghrelease.cli.commands.extract import extract_cmd
from ghrelease.cli.commands.latest import latest_cmd, transition_cmd
from ghrelease.cli.commands.params_tags import params_tags_cmd
from ghrelease.cli.commands.validate import validate_cmd
from ghrelease.config import config

app = typer.Typer(
    name="ghrelease",
    help="ghrelease: release tag validation and version ordering for release pipelines.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)

# Register subcommands
app.command(name="validate", help="Validate a release tag.")(validate_cmd)
app.command(name="compare", help="Compare two dotted versions.")(compare_cmd)
app.command(name="extract", help="Print the version part of a release tag.")(extract_cmd)
app.command(name="latest", help="Print the latest release tag.")(latest_cmd)
app.command(name="transition", help="Print the previous and current release.")(transition_cmd)
app.command(name="params-tags", help="List or check params repo tags for a repository.")(
    params_tags_cmd
)


@app.callback()
def main_callback(
    log_level: str = typer.Option(
        None,
        "--log-level",
        help="Logging level (defaults to GHRELEASE_LOG_LEVEL).",
    ),
) -> None:
    """Configure logging before any subcommand runs."""
    level = (log_level or config.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
