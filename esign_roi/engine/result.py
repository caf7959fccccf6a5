"""Immutable results produced by one calculation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from esign_roi.models.enums import CostCategory


@dataclass(frozen=True)
class AnnualCosts:
    """Annual spend for the paper-based and e-signature workflows."""

    # Paper-based
    paper_printing: float
    storage_filing: float
    paper_staff_time: float
    doc_loss_recreation: float
    paper_compliance_audit: float

    # Reserved: no formula yet, always None
    patient_denial_cost_paper: Optional[float]
    patient_denial_cost_esig: Optional[float]
    patient_denial_savings: Optional[float]

    # None when the penalty is not modeled
    compliance_dpdp_penalty_paper: Optional[float]
    compliance_dpdp_penalty_esig: Optional[float]
    compliance_dpdp_penalty_savings: Optional[float]

    total_paper_cost: float

    # E-signature
    esig_staff_time: float
    esig_compliance_audit: float
    software_subscription: float
    total_esig_cost: float

    annual_savings: float


@dataclass(frozen=True)
class ROIMetrics:
    """Payback and multi-year return figures.

    Ratios whose denominator is not positive hold ``math.inf``.
    """

    annual_savings_year2_plus: float
    implementation_cost: float
    payback_period_months: float
    net_benefit_year1: float
    year1_roi_percent: float
    year2_roi_percent: float
    year3_roi_percent: float
    year5_roi_percent: float
    net_savings_3_years: float
    net_savings_5_years: float


@dataclass(frozen=True)
class Benefits:
    pages_saved_annually: float


@dataclass(frozen=True)
class CostLineItem:
    """One row of the paper vs. e-signature comparison."""

    category: CostCategory
    label: str
    paper: Optional[float]
    esig: Optional[float]
    savings: Optional[float]


@dataclass(frozen=True)
class CostBreakdown:
    rows: list[CostLineItem]
    total_paper_cost: float
    total_esig_cost: float
    annual_savings: float


@dataclass(frozen=True)
class CalculationResult:
    """Top-level result object for a complete ROI calculation."""

    annual_costs: AnnualCosts
    roi_metrics: ROIMetrics
    benefits: Benefits
    breakdown: CostBreakdown
    savings_percent: Optional[float] = None
