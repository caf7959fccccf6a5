from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Optional


@dataclass
class InputParams:
    """Operational inputs entered by the person using the calculator.

    Any field may hold NaN while the corresponding form field is cleared.
    The engine reads through that without mutating the record.
    """

    documents_per_year: float
    pages_per_document: float
    signatories_per_document: float
    staff_handling_documents: float
    esig_annual_cost: float
    implementation_cost: float
    implementation_timeline_months: float


@dataclass
class CostAssumptions:
    """Industry cost assumptions. Defaults are the stock values shown in the UI.

    The two DPDP penalty fields are optional: ``None`` means the penalty is
    not modeled, which is different from a zero-cost penalty.
    """

    paper_cost_per_page: float = 0.1
    storage_cost_per_doc: float = 2.0
    paper_time_per_doc: float = 15.0  # minutes
    staff_hourly_cost: float = 120.0
    document_loss_rate: float = 2.0  # percent
    paper_compliance_cost: float = 100_000.0
    esig_time_per_doc: float = 2.0  # minutes
    esig_compliance_cost: float = 20_000.0
    paper_dpdp_penalty: Optional[float] = None
    esig_dpdp_penalty: Optional[float] = None

    OPTIONAL_FIELDS = frozenset({"paper_dpdp_penalty", "esig_dpdp_penalty"})

    @classmethod
    def field_names(cls) -> list[str]:
        return [f.name for f in fields(cls)]
