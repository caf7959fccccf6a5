from .loader import get_default_catalog, load_catalog
from .schema import AssumptionCatalog, AssumptionOverrides, AssumptionSpec, apply_overrides

__all__ = [
    "AssumptionCatalog",
    "AssumptionOverrides",
    "AssumptionSpec",
    "apply_overrides",
    "get_default_catalog",
    "load_catalog",
]
