"""ghrelease CLI — Typer-based command-line interface.

Provides the ``ghrelease`` command with subcommands for validating release
tags, comparing versions, and picking releases out of tag lists.

All output uses Rich for formatted terminal display.
"""
