# TodoDesk
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""
Remote store configuration.

Values come from the process environment or a ``.env`` file in the working
directory. Both ``SUPABASE_*`` and the ``REACT_APP_SUPABASE_*`` names used by
web front-ends are accepted so one ``.env`` can serve both.

Usage:
    from tododesk.core.settings import get_settings

    url = get_settings().supabase_url
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

URL_ENV_NAMES = ("SUPABASE_URL", "REACT_APP_SUPABASE_URL")
KEY_ENV_NAMES = ("SUPABASE_ANON_KEY", "SUPABASE_KEY", "REACT_APP_SUPABASE_ANON_KEY")


class StoreSettings(BaseSettings):
    """Connection settings for the hosted todo table."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    supabase_url: str = Field(default="", validation_alias=AliasChoices(*URL_ENV_NAMES))
    supabase_anon_key: str = Field(default="", validation_alias=AliasChoices(*KEY_ENV_NAMES))
    todos_table: str = Field(default="todos", validation_alias="TODODESK_TABLE")


@lru_cache(maxsize=1)
def get_settings() -> StoreSettings:
    """Return the cached settings instance."""
    return StoreSettings()


def reload() -> None:
    """Drop the cached settings (useful for tests)."""

    get_settings.cache_clear()
