"""
Application settings using Pydantic BaseSettings.

This module defines the settings for the smoke test. Both Supabase values
are read from the process environment only; the HTTP app loads a local
.env file into the environment at startup, the command line does not.
"""


from pydantic import Field
from pydantic_settings import BaseSettings

from ..errors.exceptions import ConfigurationError


class Settings(BaseSettings):
    """Application settings."""

    # Supabase project endpoint, e.g. https://<ref>.supabase.co
    supabase_url: str | None = Field(
        default=None,
        description="The URL of the Supabase project",
    )

    # Anonymous (public) API key for the project
    supabase_anon_key: str | None = Field(
        default=None,
        description="The anon API key of the Supabase project",
    )

    model_config = {
        "case_sensitive": False,
        "extra": "allow",
    }


def get_settings() -> Settings:
    """
    Get the application settings.

    A fresh instance is built on every call so the environment is read at
    invocation time. This function is also used as a dependency for FastAPI
    endpoints.

    Returns:
        The application settings
    """
    return Settings()


def require_supabase_config(settings: Settings) -> tuple[str, str]:
    """
    Return the Supabase URL and anon key, failing if either is missing.

    Empty values count as missing. The values are not otherwise validated.

    Raises:
        ConfigurationError: If SUPABASE_URL or SUPABASE_ANON_KEY is unset or empty
    """
    missing = [
        name
        for name, value in (
            ("SUPABASE_URL", settings.supabase_url),
            ("SUPABASE_ANON_KEY", settings.supabase_anon_key),
        )
        if not value
    ]
    if missing:
        raise ConfigurationError(
            message="Missing SUPABASE_URL or SUPABASE_ANON_KEY",
            details={"missing": missing},
        )
    return settings.supabase_url, settings.supabase_anon_key
