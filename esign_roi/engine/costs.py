"""Annual cost model for the paper-based and e-signature workflows."""

from __future__ import annotations

from typing import Optional

from esign_roi.engine.numeric import sanitize
from esign_roi.engine.result import AnnualCosts
from esign_roi.models.inputs import CostAssumptions, InputParams


def _penalty_savings(paper: Optional[float], esig: Optional[float]) -> Optional[float]:
    if paper is None or esig is None:
        return None
    return paper - esig


def calculate_annual_costs(
    inputs: InputParams,
    assumptions: CostAssumptions,
) -> AnnualCosts:
    """Derive the full annual cost comparison.

    Paper_Printing  = docs * pages * paper_cost_per_page
    Storage_Filing  = docs * storage_cost_per_doc
    Staff_Time      = docs * (minutes_per_doc / 60) * staff_hourly_cost
    Doc_Loss        = docs * (loss_rate / 100) * (pages * paper_cost_per_page)
    Compliance      = flat annual cost (not volume-scaled)
    Subscription    = esig_annual_cost

    A DPDP penalty set to None is left out of the totals and keeps the
    derived penalty savings at None.
    """
    docs_per_year = sanitize(inputs.documents_per_year)
    pages_per_doc = sanitize(inputs.pages_per_document)
    esig_annual_cost = sanitize(inputs.esig_annual_cost)

    # Paper-based
    paper_printing = docs_per_year * pages_per_doc * assumptions.paper_cost_per_page
    storage_filing = docs_per_year * assumptions.storage_cost_per_doc
    paper_staff_time = (
        docs_per_year
        * (assumptions.paper_time_per_doc / 60)
        * assumptions.staff_hourly_cost
    )
    loss_rate = assumptions.document_loss_rate / 100
    doc_loss_recreation = (
        docs_per_year * loss_rate * (pages_per_doc * assumptions.paper_cost_per_page)
    )
    paper_compliance = assumptions.paper_compliance_cost
    paper_penalty = assumptions.paper_dpdp_penalty

    total_paper_cost = (
        paper_printing
        + storage_filing
        + paper_staff_time
        + doc_loss_recreation
        + paper_compliance
        + (paper_penalty if paper_penalty is not None else 0.0)
    )

    # E-signature
    esig_staff_time = (
        docs_per_year
        * (assumptions.esig_time_per_doc / 60)
        * assumptions.staff_hourly_cost
    )
    esig_compliance = assumptions.esig_compliance_cost
    esig_penalty = assumptions.esig_dpdp_penalty

    total_esig_cost = (
        esig_staff_time
        + esig_compliance
        + esig_annual_cost
        + (esig_penalty if esig_penalty is not None else 0.0)
    )

    return AnnualCosts(
        paper_printing=paper_printing,
        storage_filing=storage_filing,
        paper_staff_time=paper_staff_time,
        doc_loss_recreation=doc_loss_recreation,
        paper_compliance_audit=paper_compliance,
        patient_denial_cost_paper=None,
        patient_denial_cost_esig=None,
        patient_denial_savings=None,
        compliance_dpdp_penalty_paper=paper_penalty,
        compliance_dpdp_penalty_esig=esig_penalty,
        compliance_dpdp_penalty_savings=_penalty_savings(paper_penalty, esig_penalty),
        total_paper_cost=total_paper_cost,
        esig_staff_time=esig_staff_time,
        esig_compliance_audit=esig_compliance,
        software_subscription=esig_annual_cost,
        total_esig_cost=total_esig_cost,
        annual_savings=total_paper_cost - total_esig_cost,
    )
