"""Unit tests for the CLI — Typer command registration and behavior.

Exercises every command through typer.testing.CliRunner, including tag
lists read from stdin.
"""

from __future__ import annotations

from typer.testing import CliRunner

from ghrelease.cli.app import app

runner = CliRunner()


# ---------------------------------------------------------------------------
# Test: CLI help and registration
# ---------------------------------------------------------------------------


class TestCliApp:
    """The CLI must register all expected commands and show help."""

    def test_no_args_shows_help(self):
        result = runner.invoke(app, [])
        # Typer's no_args_is_help may exit with 0 or 2 depending on version
        assert result.exit_code in (0, 2)
        assert "usage" in result.output.lower()

    def test_help_flag(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        for command in ("validate", "compare", "extract", "latest", "transition", "params-tags"):
            assert command in result.output

    def test_log_level_option(self):
        result = runner.invoke(app, ["--log-level", "debug", "extract", "release-v1.0.0"])
        assert result.exit_code == 0


# ---------------------------------------------------------------------------
# Test: validate
# ---------------------------------------------------------------------------


class TestValidateCommand:
    def test_valid(self):
        result = runner.invoke(app, ["validate", "release-v1.2.3"])
        assert result.exit_code == 0
        assert "Valid release parameter: release-v1.2.3" in result.output
        assert "Major=1, Minor=2, Patch=3" in result.output

    def test_empty(self):
        result = runner.invoke(app, ["validate", ""])
        assert result.exit_code == 1
        assert "Parameter is required" in result.output
        assert "Example: release-v1.0.0" in result.output

    def test_missing_argument_is_empty(self):
        result = runner.invoke(app, ["validate"])
        assert result.exit_code == 1
        assert "Parameter is required" in result.output

    def test_missing_prefix(self):
        result = runner.invoke(app, ["validate", "v1.0.0"])
        assert result.exit_code == 1
        assert "must start with 'release-v'" in result.output

    def test_invalid_format(self):
        result = runner.invoke(app, ["validate", "release-v1.0"])
        assert result.exit_code == 1
        assert "MAJOR.MINOR.PATCH" in result.output

    def test_quiet(self):
        result = runner.invoke(app, ["validate", "--quiet", "release-v1.0"])
        assert result.exit_code == 1
        assert result.output == ""

    def test_custom_prefix(self):
        result = runner.invoke(app, ["validate", "--prefix", "rel-", "rel-1.0.0"])
        assert result.exit_code == 0

    def test_example_uses_custom_prefix(self):
        result = runner.invoke(app, ["validate", "--prefix", "rel-", "rel-1.0"])
        assert result.exit_code == 1
        assert "Example: rel-1.0.0" in result.output
        assert "release-v" not in result.output

    def test_very_long_component(self):
        result = runner.invoke(app, ["validate", f"release-v{'1' * 5000}.0.0"])
        assert result.exit_code == 0
        assert result.exception is None
        assert "Minor=0, Patch=0" in result.output


# ---------------------------------------------------------------------------
# Test: compare / extract
# ---------------------------------------------------------------------------


class TestCompareCommand:
    def test_less(self):
        result = runner.invoke(app, ["compare", "1.2.3", "1.2.4"])
        assert result.exit_code == 0
        assert result.output.strip() == "-1"

    def test_greater(self):
        result = runner.invoke(app, ["compare", "1.10.0", "1.9.0"])
        assert result.output.strip() == "1"

    def test_equal(self):
        result = runner.invoke(app, ["compare", "2.0.0", "2.0.0"])
        assert result.output.strip() == "0"

    def test_malformed(self):
        result = runner.invoke(app, ["compare", "1.x", "1.0"])
        assert result.exit_code == 1
        assert "Invalid version component" in result.output

    def test_very_long_component(self):
        result = runner.invoke(app, ["compare", "1" * 5000, "1"])
        assert result.exit_code == 0
        assert result.output.strip() == "1"


class TestExtractCommand:
    def test_extract(self):
        result = runner.invoke(app, ["extract", "release-v1.2.3"])
        assert result.exit_code == 0
        assert result.output.strip() == "1.2.3"

    def test_extract_custom_prefix(self):
        result = runner.invoke(app, ["extract", "--prefix", "rel-", "rel-3.2.1"])
        assert result.output.strip() == "3.2.1"


# ---------------------------------------------------------------------------
# Test: latest / transition / params-tags
# ---------------------------------------------------------------------------


class TestLatestCommand:
    def test_from_arguments(self):
        result = runner.invoke(app, ["latest", "release-v1.9.0", "release-v1.10.0", "v3.0.0"])
        assert result.exit_code == 0
        assert result.output.strip() == "release-v1.10.0"

    def test_from_stdin(self, git_tags: list[str]):
        result = runner.invoke(app, ["latest", "--version-only"], input="\n".join(git_tags) + "\n")
        assert result.exit_code == 0
        assert result.output.strip() == "1.10.0"

    def test_no_tags(self):
        result = runner.invoke(app, ["latest"], input="")
        assert result.exit_code == 1
        assert "No release tags found" in result.output


class TestTransitionCommand:
    def test_upgrade(self, git_tags: list[str]):
        result = runner.invoke(app, ["transition", *git_tags])
        assert result.exit_code == 0
        assert "v1.9.0 -> v1.10.0" in result.output

    def test_require_upgrade_fails_for_single_release(self):
        result = runner.invoke(app, ["transition", "--require-upgrade", "release-v1.0.0"])
        assert result.exit_code == 1
        assert "not newer" in result.output

    def test_single_release_warns(self):
        result = runner.invoke(app, ["transition", "release-v1.0.0"])
        assert result.exit_code == 0
        assert "v1.0.0 -> v1.0.0" in result.output


class TestParamsTagsCommand:
    def test_lists_versions(self, params_tags: list[str]):
        result = runner.invoke(app, ["params-tags", "tkgi-upgrade", *params_tags])
        assert result.exit_code == 0
        assert "> release-v1.0.0" in result.output
        assert "> release-v1.1.0" in result.output
        assert "v2.0.0" not in result.output

    def test_check_known(self, params_tags: list[str]):
        result = runner.invoke(
            app,
            ["params-tags", "--check", "tkgi-install-release-v2.0.0", "tkgi-install"],
            input="\n".join(params_tags),
        )
        assert result.exit_code == 0

    def test_check_unknown(self, params_tags: list[str]):
        result = runner.invoke(
            app,
            ["params-tags", "--check", "tkgi-install-release-v9.0.0", "tkgi-install"],
            input="\n".join(params_tags),
        )
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_no_tags_for_repo(self):
        result = runner.invoke(app, ["params-tags", "nothing", "other-release-v1.0.0"])
        assert result.exit_code == 0
        assert "No params tags found" in result.output
