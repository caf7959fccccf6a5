"""Tests for the JSON wire format."""

import json
import math

import pytest

from esign_roi.engine.calculator import ROICalculator
from esign_roi.engine.serialization import (
    cost_assumptions_to_dict,
    input_params_from_dict,
    input_params_to_dict,
    json_safe,
    result_to_dict,
)
from esign_roi.models.inputs import CostAssumptions


class TestInputParamsFromDict:
    def test_numbers(self):
        inputs = input_params_from_dict({"documents_per_year": 2_000_000, "pages_per_document": 5})
        assert inputs.documents_per_year == 2_000_000
        assert inputs.pages_per_document == 5

    def test_null_and_missing_become_nan(self):
        inputs = input_params_from_dict({"documents_per_year": None})
        assert math.isnan(inputs.documents_per_year)
        assert math.isnan(inputs.implementation_cost)

    def test_numeric_strings(self):
        assert input_params_from_dict({"esig_annual_cost": "1500000"}).esig_annual_cost == 1_500_000
        assert math.isnan(input_params_from_dict({"esig_annual_cost": "abc"}).esig_annual_cost)

    def test_bool_is_not_a_number(self):
        assert math.isnan(input_params_from_dict({"pages_per_document": True}).pages_per_document)

    def test_int_too_large_for_float_is_cleared(self):
        inputs = input_params_from_dict({"documents_per_year": 10**400, "pages_per_document": 5})
        assert math.isnan(inputs.documents_per_year)
        assert inputs.pages_per_document == 5

    def test_round_trip_keeps_cleared_as_null(self, cleared_inputs):
        assert input_params_to_dict(cleared_inputs)["documents_per_year"] is None


class TestResultToDict:
    def test_top_level_keys(self, hospital_inputs):
        payload = result_to_dict(ROICalculator().calculate(hospital_inputs))
        assert set(payload) == {"annualCosts", "roiMetrics", "benefits", "breakdown", "savingsPercent"}
        assert payload["annualCosts"]["paper_printing"] == pytest.approx(1_000_000)

    def test_infinity_becomes_null(self, small_office_inputs):
        payload = result_to_dict(ROICalculator().calculate(small_office_inputs))
        assert payload["roiMetrics"]["payback_period_months"] is None

    def test_penalty_none_stays_null(self, hospital_inputs):
        payload = result_to_dict(ROICalculator().calculate(hospital_inputs))
        assert payload["annualCosts"]["compliance_dpdp_penalty_savings"] is None

    def test_categories_serialized_as_strings(self, hospital_inputs):
        payload = result_to_dict(ROICalculator().calculate(hospital_inputs))
        assert payload["breakdown"]["rows"][0]["category"] == "printing"

    def test_strict_json(self, cleared_inputs):
        """No Infinity/NaN tokens leak into the JSON body."""
        payload = result_to_dict(ROICalculator().calculate(cleared_inputs))
        json.dumps(payload, allow_nan=False)


class TestJsonSafe:
    def test_nested(self):
        assert json_safe({"a": [1.0, math.nan], "b": {"c": -math.inf}}) == {
            "a": [1.0, None],
            "b": {"c": None},
        }

    def test_assumption_defaults(self):
        d = cost_assumptions_to_dict(CostAssumptions())
        assert d["paper_cost_per_page"] == 0.1
        assert d["paper_dpdp_penalty"] is None
