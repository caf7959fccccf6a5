"""Records every calculation in the tracking table.

Tracking is fire-and-forget from the calculator's point of view: ``track``
never raises, and a failure only produces a warning in the logs.
"""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Mapping, Optional
from uuid import uuid4

from supabase import Client

from esign_roi.engine.formatting import format_currency, format_percent
from esign_roi.engine.numeric import finite_float
from esign_roi.persistence.diagnostics import NETWORK_HINT, describe_failure, may_have_written

logger = logging.getLogger(__name__)


def get_client_ip(headers: Mapping[str, str]) -> str:
    """Resolve the caller's IP from proxy headers.

    Priority: first x-forwarded-for entry, x-real-ip, then Cloudflare's
    cf-connecting-ip.
    """
    forwarded = headers.get("x-forwarded-for")
    if forwarded:
        first = forwarded.split(",")[0].strip()
        if first:
            return first

    real_ip = headers.get("x-real-ip")
    if real_ip:
        return real_ip

    cf_ip = headers.get("cf-connecting-ip")
    if cf_ip:
        return cf_ip

    return "unknown"


@dataclass(frozen=True)
class RequestMetadata:
    ip_address: str = "unknown"
    user_agent: str = "unknown"
    referrer: Optional[str] = None

    @classmethod
    def from_headers(cls, headers: Mapping[str, str]) -> RequestMetadata:
        return cls(
            ip_address=get_client_ip(headers),
            user_agent=headers.get("user-agent") or "unknown",
            referrer=headers.get("referer") or None,
        )


def _metric(section: Any, name: str) -> Optional[float]:
    """Read a numeric metric from a nested results dict; None if absent."""
    if not isinstance(section, Mapping):
        return None
    return finite_float(section.get(name))


def build_tracking_record(
    input_params: Mapping[str, Any],
    results: Mapping[str, Any],
    metadata: RequestMetadata,
    now: Optional[datetime] = None,
) -> dict[str, Any]:
    """Row for the tracking table: full payloads plus flattened key metrics."""
    annual_costs = results.get("annualCosts")
    roi_metrics = results.get("roiMetrics")
    calculated_at = now or datetime.now(tz=timezone.utc)
    return {
        "ip_address": metadata.ip_address,
        "user_agent": metadata.user_agent,
        "referrer": metadata.referrer,
        "input_parameters": dict(input_params),
        "calculated_results": dict(results),
        "documents_per_year": _metric(input_params, "documents_per_year"),
        "pages_per_document": _metric(input_params, "pages_per_document"),
        "annual_savings": _metric(annual_costs, "annual_savings"),
        "year1_roi_percent": _metric(roi_metrics, "year1_roi_percent"),
        "total_paper_cost": _metric(annual_costs, "total_paper_cost"),
        "total_esig_cost": _metric(annual_costs, "total_esig_cost"),
        "calculated_at": calculated_at.isoformat(),
    }


@dataclass
class TrackingOutcome:
    """Result of one tracking attempt, including failure diagnostics."""

    request_id: str
    success: bool
    record_id: Optional[str] = None
    tracking_disabled: bool = False
    error: Optional[str] = None
    details: Optional[str] = None
    code: Optional[str] = None
    hint: Optional[str] = None
    network_error: bool = False
    attempts: int = 0
    duration_ms: int = 0

    def to_response(self) -> tuple[int, dict[str, Any]]:
        """HTTP status code and JSON body for the track-calculation route."""
        if self.tracking_disabled:
            return 200, {
                "success": True,
                "trackingDisabled": True,
                "message": "Supabase credentials missing. Tracking skipped.",
            }
        if self.success:
            return 200, {"success": True, "id": self.record_id, "requestId": self.request_id}

        body: dict[str, Any] = {
            "error": self.error,
            "details": self.details,
            "code": self.code,
            "hint": self.hint,
            "requestId": self.request_id,
        }
        return (503 if self.network_error else 500), body


@dataclass
class CalculationTracker:
    """Inserts calculation snapshots into the tracking table.

    ``client`` is None when Supabase is not configured; every call then
    returns a disabled outcome without touching the network. Only failures
    that cannot have written the row are retried; timeouts are not.
    """

    client: Optional[Client]
    table: str = "calculation_tracking"
    timeout_seconds: float = 5.0
    max_retries: int = 1
    retry_backoff_seconds: float = 0.4

    @property
    def enabled(self) -> bool:
        return self.client is not None

    def _insert(self, record: dict[str, Any]) -> Optional[str]:
        response = self.client.table(self.table).insert(record).execute()
        rows = response.data or []
        if rows and isinstance(rows[0], Mapping) and rows[0].get("id") is not None:
            return str(rows[0]["id"])
        return None

    async def track(
        self,
        input_params: Mapping[str, Any],
        results: Mapping[str, Any],
        metadata: Optional[RequestMetadata] = None,
    ) -> TrackingOutcome:
        request_id = uuid4().hex[:7]
        started = time.monotonic()

        if self.client is None:
            logger.warning(f"[{request_id}] Supabase client not available. Tracking disabled.")
            return TrackingOutcome(request_id=request_id, success=True, tracking_disabled=True)

        record = build_tracking_record(input_params, results, metadata or RequestMetadata())
        logger.info(
            "[%s] Tracking calculation: ip=%s docs/year=%s savings=%s year1_roi=%s",
            request_id,
            record["ip_address"],
            record["documents_per_year"] if record["documents_per_year"] is not None else "N/A",
            format_currency(record["annual_savings"]) if record["annual_savings"] is not None else "N/A",
            format_percent(record["year1_roi_percent"]) if record["year1_roi_percent"] is not None else "N/A",
        )

        attempts = 0
        while True:
            attempts += 1
            try:
                record_id = await asyncio.wait_for(
                    asyncio.to_thread(self._insert, record),
                    timeout=self.timeout_seconds,
                )
            except Exception as e:
                failure = describe_failure(e)
                if (
                    failure.is_network_error
                    and not may_have_written(e)
                    and attempts <= self.max_retries
                ):
                    logger.warning(
                        f"[{request_id}] Tracking attempt {attempts} failed "
                        f"({failure.error_type}: {failure.message}); retrying"
                    )
                    await asyncio.sleep(self.retry_backoff_seconds * (2 ** (attempts - 1)))
                    continue

                duration_ms = int((time.monotonic() - started) * 1000)
                logger.warning(
                    "[%s] Tracking failed after %dms and %d attempt(s): %s: %s "
                    "(code=%s, hint=%s)",
                    request_id,
                    duration_ms,
                    attempts,
                    failure.error_type,
                    failure.message,
                    failure.code or "N/A",
                    failure.hint or "N/A",
                )
                return TrackingOutcome(
                    request_id=request_id,
                    success=False,
                    error=(
                        "Network error connecting to Supabase"
                        if failure.is_network_error
                        else "Failed to save calculation"
                    ),
                    details=failure.message,
                    code=failure.code,
                    hint=NETWORK_HINT if failure.is_network_error else failure.hint,
                    network_error=failure.is_network_error,
                    attempts=attempts,
                    duration_ms=duration_ms,
                )

            duration_ms = int((time.monotonic() - started) * 1000)
            logger.info(f"[{request_id}] Calculation tracked in {duration_ms}ms (id={record_id})")
            return TrackingOutcome(
                request_id=request_id,
                success=True,
                record_id=record_id,
                attempts=attempts,
                duration_ms=duration_ms,
            )
