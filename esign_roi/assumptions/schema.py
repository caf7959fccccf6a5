"""Pydantic models for the assumption catalog and for user overrides."""

from __future__ import annotations

from dataclasses import replace
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from esign_roi.models.inputs import CostAssumptions


class AssumptionSpec(BaseModel):
    """Display metadata for one CostAssumptions field."""

    key: str = Field(description="Must name a CostAssumptions field")
    label: str
    unit: str
    notes: str = ""
    step: float = Field(gt=0, description="Slider / input increment")

    @field_validator("key")
    @classmethod
    def key_must_be_assumption(cls, v: str) -> str:
        if v not in CostAssumptions.field_names():
            raise ValueError(f"'{v}' is not a cost assumption")
        return v


class AssumptionCatalog(BaseModel):
    """Top-level assumption catalog configuration."""

    id: str
    name: str
    version: str
    currency: str = "INR"
    assumptions: list[AssumptionSpec] = Field(min_length=1)

    @model_validator(mode="after")
    def keys_cover_every_assumption(self) -> AssumptionCatalog:
        keys = [a.key for a in self.assumptions]
        duplicates = sorted({k for k in keys if keys.count(k) > 1})
        if duplicates:
            raise ValueError(f"Duplicate assumption keys: {duplicates}")
        missing = set(CostAssumptions.field_names()) - set(keys)
        if missing:
            raise ValueError(f"Catalog is missing assumptions: {sorted(missing)}")
        return self

    def get(self, key: str) -> Optional[AssumptionSpec]:
        return next((a for a in self.assumptions if a.key == key), None)


class AssumptionOverrides(BaseModel):
    """Partial update of the cost assumptions.

    Only fields that were actually sent are applied. The DPDP penalties can
    be sent as null to stop modeling them; every other field must be a
    finite number when present.
    """

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    paper_cost_per_page: Optional[float] = None
    storage_cost_per_doc: Optional[float] = None
    paper_time_per_doc: Optional[float] = None
    staff_hourly_cost: Optional[float] = None
    document_loss_rate: Optional[float] = None
    paper_compliance_cost: Optional[float] = None
    esig_time_per_doc: Optional[float] = None
    esig_compliance_cost: Optional[float] = None
    paper_dpdp_penalty: Optional[float] = None
    esig_dpdp_penalty: Optional[float] = None

    @model_validator(mode="after")
    def only_penalties_nullable(self) -> AssumptionOverrides:
        for name in self.model_fields_set:
            if name in CostAssumptions.OPTIONAL_FIELDS:
                continue
            if getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self

    def changes(self) -> dict[str, Optional[float]]:
        return self.model_dump(exclude_unset=True)


def apply_overrides(
    base: CostAssumptions,
    overrides: Optional[AssumptionOverrides],
) -> CostAssumptions:
    """Return a copy of ``base`` with the overridden fields replaced."""
    if overrides is None:
        return replace(base)
    return replace(base, **overrides.changes())
