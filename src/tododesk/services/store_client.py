# TodoDesk
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Process-wide Supabase client handle."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any

from supabase import Client, create_client

from tododesk.core.settings import KEY_ENV_NAMES, URL_ENV_NAMES, get_settings
from tododesk.services.types import StoreError

log = logging.getLogger(__name__)

__all__ = ["UnconfiguredClient", "create_store_client", "get_store_client"]


class UnconfiguredClient:
    """Stand-in returned when the client library rejects the configuration.

    Construction never fails; every table access raises :class:`StoreError`
    so the failure shows up where the remote call is made.
    """

    def __init__(self, reason: str) -> None:
        self.reason = reason

    def table(self, name: str) -> Any:
        raise StoreError(self.reason)

    from_ = table


def create_store_client(url: str | None, key: str | None) -> Client | UnconfiguredClient:
    """Build a client for ``url``/``key``; logs instead of raising."""

    if not url or not key:
        log.error(
            "Supabase URL or anon key is missing. Ensure %s and %s are set in "
            "your environment or .env file.",
            URL_ENV_NAMES[0],
            KEY_ENV_NAMES[0],
        )

    try:
        return create_client(url or "", key or "")
    except Exception as exc:  # the library validates url/key eagerly
        log.debug("Supabase client construction failed: %s", exc)
        return UnconfiguredClient(str(exc) or "Supabase client is not configured")


@lru_cache(maxsize=1)
def get_store_client() -> Client | UnconfiguredClient:
    """Return the shared client, creating it on first use."""

    settings = get_settings()
    return create_store_client(settings.supabase_url, settings.supabase_anon_key)
