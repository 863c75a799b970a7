"""Runtime configuration — env-driven.

Reads from a .env file and GHRELEASE_* environment variables.
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class ReleaseConfig(BaseSettings):
    """Release tooling configuration with environment variable overrides.

    Examples
    --------
    Override via environment::

        export GHRELEASE_RELEASE_PREFIX=rel-v
        export GHRELEASE_LOG_LEVEL=DEBUG
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="GHRELEASE_",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Tag format
    release_prefix: str = "release-v"
    example_version: str = "1.0.0"

    # Params repository holding per-foundation release tags
    params_repo: str = "params"

    log_level: str = "WARNING"


# Module-level singleton — import as `from ghrelease.config import config`
config = ReleaseConfig()
