"""Optional Supabase client built once at process start."""

from __future__ import annotations

import logging
from typing import Optional

from supabase import Client, create_client

from esign_roi.config.settings import Settings

logger = logging.getLogger(__name__)


def _mask(value: str, keep: int) -> str:
    return f"{value[:keep]}..." if len(value) > keep else value


def create_supabase_client(settings: Settings) -> Optional[Client]:
    """Return a Supabase client, or None when persistence is unavailable.

    Missing credentials are not an error: the calculator keeps working and
    tracking and saved sessions are disabled.
    """
    url = settings.supabase_url.strip()
    key = settings.supabase_key.strip()

    if not url or not key:
        logger.warning(
            "Supabase credentials missing (url=%s, key=%s). "
            "Calculation tracking and saved sessions are disabled.",
            "set" if url else "MISSING",
            "set" if key else "MISSING",
        )
        return None

    if not url.startswith("https://") or ".supabase.co" not in url:
        logger.error(
            "Invalid Supabase URL %s; expected https://<project>.supabase.co",
            _mask(url, 40),
        )
        return None

    try:
        client = create_client(url, key)
    except Exception as e:
        logger.error(f"Failed to create Supabase client: {e}")
        return None

    logger.info("Supabase client created for %s", _mask(url, 40))
    return client
