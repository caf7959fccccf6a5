"""Tests for the assumption catalog and the override workflow."""

import json

import pytest
from pydantic import ValidationError

from esign_roi.assumptions import (
    AssumptionCatalog,
    AssumptionOverrides,
    apply_overrides,
    get_default_catalog,
    load_catalog,
)
from esign_roi.models.inputs import CostAssumptions


def _catalog_dict():
    return get_default_catalog().model_dump()


class TestAssumptionCatalog:
    def test_default_catalog_covers_every_field(self):
        catalog = get_default_catalog()
        assert {a.key for a in catalog.assumptions} == set(CostAssumptions.field_names())
        assert catalog.currency == "INR"

    def test_lookup(self):
        spec = get_default_catalog().get("paper_time_per_doc")
        assert spec is not None
        assert spec.unit == "minutes"
        assert get_default_catalog().get("nope") is None

    def test_unknown_key_rejected(self):
        raw = _catalog_dict()
        raw["assumptions"][0]["key"] = "coffee_cost"
        with pytest.raises(ValidationError, match="not a cost assumption"):
            AssumptionCatalog.model_validate(raw)

    def test_missing_key_rejected(self):
        raw = _catalog_dict()
        raw["assumptions"] = raw["assumptions"][1:]
        with pytest.raises(ValidationError, match="missing assumptions"):
            AssumptionCatalog.model_validate(raw)

    def test_duplicate_key_rejected(self):
        raw = _catalog_dict()
        raw["assumptions"].append(dict(raw["assumptions"][0]))
        with pytest.raises(ValidationError, match="Duplicate"):
            AssumptionCatalog.model_validate(raw)

    def test_non_positive_step_rejected(self):
        raw = _catalog_dict()
        raw["assumptions"][0]["step"] = 0
        with pytest.raises(ValidationError):
            AssumptionCatalog.model_validate(raw)

    def test_load_from_path(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps(_catalog_dict()), encoding="utf-8")
        assert load_catalog(path).id == get_default_catalog().id

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_catalog(tmp_path / "missing.json")


class TestAssumptionOverrides:
    def test_partial_override(self):
        base = CostAssumptions()
        updated = apply_overrides(base, AssumptionOverrides(staff_hourly_cost=250))
        assert updated.staff_hourly_cost == 250
        assert updated.paper_cost_per_page == base.paper_cost_per_page

    def test_base_not_mutated(self):
        base = CostAssumptions()
        apply_overrides(base, AssumptionOverrides(staff_hourly_cost=250))
        assert base.staff_hourly_cost == 120

    def test_no_overrides_returns_copy(self):
        base = CostAssumptions()
        updated = apply_overrides(base, None)
        assert updated == base
        assert updated is not base

    def test_penalty_can_be_set_and_cleared(self):
        with_penalty = apply_overrides(
            CostAssumptions(), AssumptionOverrides(paper_dpdp_penalty=500_000)
        )
        assert with_penalty.paper_dpdp_penalty == 500_000

        cleared = apply_overrides(
            with_penalty, AssumptionOverrides.model_validate({"paper_dpdp_penalty": None})
        )
        assert cleared.paper_dpdp_penalty is None

    def test_unsent_fields_untouched(self):
        base = CostAssumptions(esig_dpdp_penalty=10_000)
        updated = apply_overrides(base, AssumptionOverrides(paper_dpdp_penalty=1))
        assert updated.esig_dpdp_penalty == 10_000

    def test_required_field_cannot_be_null(self):
        with pytest.raises(ValidationError, match="cannot be null"):
            AssumptionOverrides.model_validate({"staff_hourly_cost": None})

    def test_non_finite_rejected(self):
        with pytest.raises(ValidationError):
            AssumptionOverrides.model_validate({"paper_cost_per_page": float("inf")})

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError):
            AssumptionOverrides.model_validate({"coffee_cost": 10})
