"""Runs the cost, ROI and benefits stages for one set of inputs."""

from __future__ import annotations

import logging
from typing import Optional

from esign_roi.engine.benefits import calculate_benefits
from esign_roi.engine.breakdown import build_cost_breakdown, savings_share
from esign_roi.engine.costs import calculate_annual_costs
from esign_roi.engine.result import CalculationResult
from esign_roi.engine.roi import calculate_roi_metrics
from esign_roi.models.inputs import CostAssumptions, InputParams

logger = logging.getLogger(__name__)


class ROICalculator:
    """Stateless engine that runs ROI calculations."""

    def calculate(
        self,
        inputs: InputParams,
        assumptions: Optional[CostAssumptions] = None,
    ) -> CalculationResult:
        """Run every stage and bundle the results.

        Falls back to the stock industry assumptions when none are given.
        """
        if assumptions is None:
            assumptions = CostAssumptions()

        annual_costs = calculate_annual_costs(inputs, assumptions)
        roi_metrics = calculate_roi_metrics(inputs, annual_costs)
        benefits = calculate_benefits(inputs)

        logger.debug(
            "Calculated ROI: annual_savings=%.2f year1_roi=%.1f%%",
            annual_costs.annual_savings,
            roi_metrics.year1_roi_percent,
        )

        return CalculationResult(
            annual_costs=annual_costs,
            roi_metrics=roi_metrics,
            benefits=benefits,
            breakdown=build_cost_breakdown(annual_costs),
            savings_percent=savings_share(annual_costs),
        )
