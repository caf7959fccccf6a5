"""Conversion between engine records and the JSON wire format.

Field names match the dataclasses exactly. JSON has no representation for
infinity or NaN, so non-finite floats travel as ``null``, the same value the
browser's JSON.stringify emits for them.
"""

from __future__ import annotations

import math
from dataclasses import asdict, fields
from enum import Enum
from typing import Any, Mapping

from esign_roi.engine.result import CalculationResult
from esign_roi.models.inputs import CostAssumptions, InputParams


def json_safe(value: Any) -> Any:
    """Recursively replace non-finite floats with None and enums with values."""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {k: json_safe(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [json_safe(v) for v in value]
    return value


def _as_float(raw: Any) -> float:
    if isinstance(raw, bool):
        return math.nan
    if isinstance(raw, (int, float, str)):
        try:
            return float(raw)
        except (ValueError, OverflowError):
            return math.nan
    return math.nan


def input_params_from_dict(d: Mapping[str, Any]) -> InputParams:
    """Build InputParams from a wire dict; missing or null fields become NaN."""
    return InputParams(**{f.name: _as_float(d.get(f.name)) for f in fields(InputParams)})


def input_params_to_dict(inputs: InputParams) -> dict[str, Any]:
    return json_safe(asdict(inputs))


def cost_assumptions_to_dict(assumptions: CostAssumptions) -> dict[str, Any]:
    return json_safe(asdict(assumptions))


def result_to_dict(result: CalculationResult) -> dict[str, Any]:
    """Serialize a CalculationResult using the tracking payload's key names."""
    return json_safe(
        {
            "annualCosts": asdict(result.annual_costs),
            "roiMetrics": asdict(result.roi_metrics),
            "benefits": asdict(result.benefits),
            "breakdown": asdict(result.breakdown),
            "savingsPercent": result.savings_percent,
        }
    )
