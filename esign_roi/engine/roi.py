"""Payback period and multi-year ROI derived from the annual cost model."""

from __future__ import annotations

import math

from esign_roi.engine.numeric import safe_ratio, sanitize
from esign_roi.engine.result import AnnualCosts, ROIMetrics
from esign_roi.models.inputs import InputParams

# Implementation cost is spread over this many years in the payback formula.
AMORTIZATION_YEARS = 5


def calculate_roi_metrics(inputs: InputParams, costs: AnnualCosts) -> ROIMetrics:
    """Derive payback and cumulative ROI figures.

    Years 1-3 divide cumulative savings by the year-1 outlay
    (implementation + one year of subscription). Year 5 nets the
    implementation cost out of the numerator and divides by five years of
    subscription plus implementation. Keep the two shapes separate.
    """
    implementation_cost = sanitize(inputs.implementation_cost)
    esig_annual_cost = sanitize(inputs.esig_annual_cost)
    annual_savings = sanitize(costs.annual_savings)

    # months = (esig_annual_cost + implementation_cost / 5) / monthly_savings
    monthly_savings = annual_savings / 12
    if monthly_savings > 0:
        payback_period = (
            esig_annual_cost + implementation_cost / AMORTIZATION_YEARS
        ) / monthly_savings
    else:
        payback_period = math.inf

    year1_investment = implementation_cost + esig_annual_cost

    year1_roi = safe_ratio(annual_savings, year1_investment) * 100
    year2_roi = safe_ratio(annual_savings * 2, year1_investment) * 100
    year3_roi = safe_ratio(annual_savings * 3, year1_investment) * 100

    five_year_net_benefit = annual_savings * 5 - implementation_cost
    five_year_investment = implementation_cost + esig_annual_cost * 5
    year5_roi = safe_ratio(five_year_net_benefit, five_year_investment) * 100

    return ROIMetrics(
        annual_savings_year2_plus=annual_savings,
        implementation_cost=implementation_cost,
        payback_period_months=payback_period,
        net_benefit_year1=annual_savings - implementation_cost,
        year1_roi_percent=year1_roi,
        year2_roi_percent=year2_roi,
        year3_roi_percent=year3_roi,
        year5_roi_percent=year5_roi,
        net_savings_3_years=annual_savings * 3 - implementation_cost,
        net_savings_5_years=annual_savings * 5 - implementation_cost,
    )
