from .benefits import calculate_benefits
from .breakdown import build_cost_breakdown
from .calculator import ROICalculator
from .costs import calculate_annual_costs
from .formatting import format_currency, format_number
from .result import AnnualCosts, Benefits, CalculationResult, ROIMetrics
from .roi import calculate_roi_metrics

__all__ = [
    "AnnualCosts",
    "Benefits",
    "CalculationResult",
    "ROICalculator",
    "ROIMetrics",
    "build_cost_breakdown",
    "calculate_annual_costs",
    "calculate_benefits",
    "calculate_roi_metrics",
    "format_currency",
    "format_number",
]
