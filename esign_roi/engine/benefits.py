from __future__ import annotations

from esign_roi.engine.result import Benefits
from esign_roi.models.inputs import InputParams


def calculate_benefits(inputs: InputParams) -> Benefits:
    """Pages_Saved = documents_per_year * pages_per_document

    Inputs are deliberately not sanitized here: a cleared field yields NaN.
    """
    return Benefits(
        pages_saved_annually=inputs.documents_per_year * inputs.pages_per_document,
    )
