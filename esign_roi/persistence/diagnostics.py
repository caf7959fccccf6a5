"""Classify database failures for logs and API responses."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Optional

import httpx

# Substrings seen in connection failures that surface as generic exceptions.
_NETWORK_MARKERS = (
    "fetch failed",
    "ECONNREFUSED",
    "ENOTFOUND",
    "Connection refused",
    "Name or service not known",
    "nodename nor servname",
    "timed out",
)

NETWORK_HINT = (
    "Check SUPABASE_URL: it must start with https:// and end with .supabase.co "
    "(no trailing slash or extra paths). Also verify network connectivity."
)


@dataclass(frozen=True)
class FailureInfo:
    error_type: str
    message: str
    code: Optional[str]
    hint: Optional[str]
    is_network_error: bool


def is_network_error(exc: BaseException) -> bool:
    if isinstance(exc, (httpx.TransportError, ConnectionError, asyncio.TimeoutError, TimeoutError)):
        return True
    message = str(exc)
    return any(marker in message for marker in _NETWORK_MARKERS)


def may_have_written(exc: BaseException) -> bool:
    """True when the request may have reached the database before failing.

    ``asyncio.wait_for`` cannot cancel a write running in a worker thread,
    and a read timeout comes after the request was sent. Retrying either
    can insert the same row twice.
    """
    if isinstance(exc, (asyncio.TimeoutError, TimeoutError)):
        return True
    return isinstance(exc, (httpx.ReadTimeout, httpx.WriteTimeout))


def describe_failure(exc: BaseException) -> FailureInfo:
    """Pull code/hint from PostgREST-style errors when present."""
    code = getattr(exc, "code", None)
    hint = getattr(exc, "hint", None)
    message = getattr(exc, "message", None) or str(exc) or type(exc).__name__
    return FailureInfo(
        error_type=type(exc).__name__,
        message=str(message),
        code=str(code) if code is not None else None,
        hint=str(hint) if hint is not None else None,
        is_network_error=is_network_error(exc),
    )
