"""Named calculation sessions saved under the anonymous user."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import asdict, dataclass
from typing import Any, Callable, Mapping, Optional, TypeVar

from supabase import Client

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class SavedCalculation:
    id: str
    user_id: str
    session_name: str
    input_parameters: dict[str, Any]
    calculated_results: dict[str, Any]
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> SavedCalculation:
        return cls(
            id=str(row["id"]),
            user_id=row.get("user_id", ""),
            session_name=row.get("session_name", ""),
            input_parameters=row.get("input_parameters") or {},
            calculated_results=row.get("calculated_results") or {},
            created_at=row.get("created_at"),
            updated_at=row.get("updated_at"),
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


class SessionStore:
    """Save, list and delete calculation snapshots.

    Every method degrades to a logged error and an empty result when the
    database is unavailable or the call fails.
    """

    def __init__(
        self,
        client: Optional[Client],
        table: str = "roi_calculations",
        user_id: str = "anonymous",
        timeout_seconds: float = 5.0,
    ) -> None:
        self._client = client
        self._table = table
        self._user_id = user_id
        self._timeout = timeout_seconds

    @property
    def enabled(self) -> bool:
        return self._client is not None

    async def _run(self, fn: Callable[[], T]) -> T:
        return await asyncio.wait_for(asyncio.to_thread(fn), timeout=self._timeout)

    async def save(
        self,
        session_name: str,
        input_params: Mapping[str, Any],
        results: Mapping[str, Any],
    ) -> Optional[SavedCalculation]:
        if self._client is None:
            logger.warning("Cannot save calculation '%s': database not configured", session_name)
            return None

        row = {
            "user_id": self._user_id,
            "session_name": session_name,
            "input_parameters": dict(input_params),
            "calculated_results": dict(results),
        }

        def _insert() -> Any:
            return self._client.table(self._table).insert(row).execute()

        try:
            response = await self._run(_insert)
        except Exception as e:
            logger.error(f"Error saving calculation '{session_name}': {e}")
            return None

        if not response.data:
            logger.error(f"Error saving calculation '{session_name}': no row returned")
            return None
        return SavedCalculation.from_row(response.data[0])

    async def load(self) -> list[SavedCalculation]:
        """Return the anonymous user's saved sessions, most recent first."""
        if self._client is None:
            logger.warning("Cannot load calculations: database not configured")
            return []

        def _select() -> Any:
            return (
                self._client.table(self._table)
                .select("*")
                .eq("user_id", self._user_id)
                .order("created_at", desc=True)
                .execute()
            )

        try:
            response = await self._run(_select)
        except Exception as e:
            logger.error(f"Error loading calculations: {e}")
            return []

        return [SavedCalculation.from_row(row) for row in response.data or []]

    async def delete(self, calculation_id: str) -> bool:
        if self._client is None:
            logger.warning("Cannot delete calculation %s: database not configured", calculation_id)
            return False

        def _delete() -> Any:
            return self._client.table(self._table).delete().eq("id", calculation_id).execute()

        try:
            await self._run(_delete)
        except Exception as e:
            logger.error(f"Error deleting calculation {calculation_id}: {e}")
            return False
        return True
