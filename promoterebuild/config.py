"""Runtime settings — env-driven via pydantic-settings.

Reads from a .env file and PROMOTEREBUILD_* environment variables.
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class ResolverSettings(BaseSettings):
    """Settings for the promoterebuild CLI.

    Values are taken as given; the CLI checks ``log_level`` and
    ``output_format`` and reports bad ones as usage errors.

    Examples
    --------
    Override via environment::

        export PROMOTEREBUILD_LOG_LEVEL=DEBUG
        export PROMOTEREBUILD_OUTPUT_FORMAT=json
        export PROMOTEREBUILD_CI_BASE_URL=https://ci.example.com/
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="PROMOTEREBUILD_",
        env_file_encoding="utf-8",
    )

    log_level: str = "INFO"

    # Default rendering for ``promoterebuild resolve``: "panel" or "json"
    output_format: str = "panel"

    # Prefix for relative upstream URLs in terminal output only
    ci_base_url: str = ""

    def absolute_url(self, url: str | None) -> str | None:
        """Join a relative host URL onto ``ci_base_url`` for display."""
        if not url or not self.ci_base_url or "://" in url:
            return url
        return f"{self.ci_base_url.rstrip('/')}/{url.lstrip('/')}"
