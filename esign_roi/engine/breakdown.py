"""Line-item comparison of paper vs. e-signature spend."""

from __future__ import annotations

from typing import Optional

from esign_roi.engine.result import AnnualCosts, CostBreakdown, CostLineItem
from esign_roi.models.enums import CostCategory

_LABELS: dict[CostCategory, str] = {
    CostCategory.PRINTING: "Paper & Printing",
    CostCategory.STORAGE: "Physical Storage & Filing",
    CostCategory.STAFF_TIME: "Staff Time (Processing & Signing)",
    CostCategory.DOCUMENT_LOSS: "Document Loss/Recreation",
    CostCategory.COMPLIANCE: "Compliance & Audit",
    CostCategory.DPDP_PENALTY: "DPDP Compliance Penalty",
    CostCategory.PATIENT_DENIAL: "Patient Denial",
    CostCategory.SOFTWARE_SUBSCRIPTION: "Software Subscription",
}


def _row(
    category: CostCategory,
    paper: Optional[float],
    esig: Optional[float],
) -> CostLineItem:
    savings = paper - esig if paper is not None and esig is not None else None
    return CostLineItem(
        category=category,
        label=_LABELS[category],
        paper=paper,
        esig=esig,
        savings=savings,
    )


def build_cost_breakdown(costs: AnnualCosts) -> CostBreakdown:
    """Split the annual totals into one row per cost category.

    The paper column (None counted as zero) sums to ``total_paper_cost`` and
    the e-signature column to ``total_esig_cost``.
    """
    rows = [
        _row(CostCategory.PRINTING, costs.paper_printing, 0.0),
        _row(CostCategory.STORAGE, costs.storage_filing, 0.0),
        _row(CostCategory.STAFF_TIME, costs.paper_staff_time, costs.esig_staff_time),
        _row(CostCategory.DOCUMENT_LOSS, costs.doc_loss_recreation, 0.0),
        _row(
            CostCategory.COMPLIANCE,
            costs.paper_compliance_audit,
            costs.esig_compliance_audit,
        ),
        _row(
            CostCategory.DPDP_PENALTY,
            costs.compliance_dpdp_penalty_paper,
            costs.compliance_dpdp_penalty_esig,
        ),
        _row(
            CostCategory.PATIENT_DENIAL,
            costs.patient_denial_cost_paper,
            costs.patient_denial_cost_esig,
        ),
        _row(CostCategory.SOFTWARE_SUBSCRIPTION, 0.0, costs.software_subscription),
    ]
    return CostBreakdown(
        rows=rows,
        total_paper_cost=costs.total_paper_cost,
        total_esig_cost=costs.total_esig_cost,
        annual_savings=costs.annual_savings,
    )


def savings_share(costs: AnnualCosts) -> Optional[float]:
    """Annual savings as a percentage of current paper-based spend."""
    if costs.total_paper_cost > 0:
        return costs.annual_savings / costs.total_paper_cost * 100
    return None
