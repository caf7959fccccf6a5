"""Shared test fixtures for the e-signature ROI test suite."""

import math
from datetime import datetime, timedelta, timezone

import pytest

from esign_roi.models.inputs import CostAssumptions, InputParams


class FakeResponse:
    def __init__(self, data):
        self.data = data


class FakeQuery:
    """Mimics the chained postgrest query builder used by supabase-py."""

    def __init__(self, db, table):
        self._db = db
        self._table = table
        self._op = "select"
        self._payload = None
        self._filters = []
        self._order = None

    def insert(self, row):
        self._op = "insert"
        self._payload = row
        return self

    def select(self, *_columns):
        self._op = "select"
        return self

    def delete(self):
        self._op = "delete"
        return self

    def eq(self, column, value):
        self._filters.append((column, value))
        return self

    def order(self, column, desc=False):
        self._order = (column, desc)
        return self

    def _matches(self, row):
        return all(row.get(c) == v for c, v in self._filters)

    def execute(self):
        self._db.calls += 1
        if self._db.failures:
            raise self._db.failures.pop(0)

        rows = self._db.tables.setdefault(self._table, [])
        if self._op == "insert":
            self._db.next_id += 1
            created = self._db.epoch + timedelta(minutes=self._db.next_id)
            row = {
                "id": f"row-{self._db.next_id}",
                "created_at": created.isoformat(),
                "updated_at": created.isoformat(),
                **self._payload,
            }
            rows.append(row)
            return FakeResponse([row])
        if self._op == "delete":
            removed = [r for r in rows if self._matches(r)]
            self._db.tables[self._table] = [r for r in rows if not self._matches(r)]
            return FakeResponse(removed)

        selected = [r for r in rows if self._matches(r)]
        if self._order is not None:
            column, desc = self._order
            selected.sort(key=lambda r: r.get(column), reverse=desc)
        return FakeResponse(selected)


class FakeSupabase:
    """In-memory stand-in for supabase.Client.

    Exceptions queued in ``failures`` are raised by the next execute() calls.
    """

    def __init__(self):
        self.tables = {}
        self.failures = []
        self.calls = 0
        self.next_id = 0
        self.epoch = datetime(2024, 1, 1, tzinfo=timezone.utc)

    def table(self, name):
        return FakeQuery(self, name)


@pytest.fixture
def fake_db() -> FakeSupabase:
    return FakeSupabase()


@pytest.fixture
def default_assumptions() -> CostAssumptions:
    return CostAssumptions()


@pytest.fixture
def hospital_inputs() -> InputParams:
    """Reference scenario: 20 lakh documents a year, 1.5 Cr subscription."""
    return InputParams(
        documents_per_year=2_000_000,
        pages_per_document=5,
        signatories_per_document=2,
        staff_handling_documents=10,
        esig_annual_cost=15_000_000,
        implementation_cost=2_500_000,
        implementation_timeline_months=3,
    )


@pytest.fixture
def small_office_inputs() -> InputParams:
    """Low volume where the subscription outweighs the paper savings."""
    return InputParams(
        documents_per_year=1_000,
        pages_per_document=2,
        signatories_per_document=1,
        staff_handling_documents=2,
        esig_annual_cost=15_000_000,
        implementation_cost=2_500_000,
        implementation_timeline_months=1,
    )


@pytest.fixture
def cleared_inputs() -> InputParams:
    """Every form field cleared, as sent by the UI before first entry."""
    return InputParams(
        documents_per_year=math.nan,
        pages_per_document=math.nan,
        signatories_per_document=math.nan,
        staff_handling_documents=10,
        esig_annual_cost=math.nan,
        implementation_cost=math.nan,
        implementation_timeline_months=3,
    )
