"""Tests for the benefits counters."""

import math
from dataclasses import replace

from esign_roi.engine.benefits import calculate_benefits


class TestBenefits:
    def test_pages_saved(self, hospital_inputs):
        assert calculate_benefits(hospital_inputs).pages_saved_annually == 10_000_000

    def test_zero_documents(self, hospital_inputs):
        inputs = replace(hospital_inputs, documents_per_year=0)
        assert calculate_benefits(inputs).pages_saved_annually == 0

    def test_cleared_input_propagates_nan(self, cleared_inputs):
        """Unlike the cost and ROI stages, benefits are not sanitized."""
        assert math.isnan(calculate_benefits(cleared_inputs).pages_saved_annually)
