"""Load and validate the assumption catalog from JSON files."""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path

from esign_roi.assumptions.schema import AssumptionCatalog

# Default directory for catalog config files
_CONFIG_DIR = Path(__file__).parent / "configs"


def load_catalog(file_path: Path | None = None) -> AssumptionCatalog:
    """Load and validate an assumption catalog from a JSON file.

    If no path is provided, loads the bundled default catalog.
    """
    if file_path is None:
        file_path = _CONFIG_DIR / "default_v1.json"

    if not file_path.exists():
        raise FileNotFoundError(f"Assumption catalog not found: {file_path}")

    with open(file_path, "r", encoding="utf-8") as f:
        raw = json.load(f)

    return AssumptionCatalog.model_validate(raw)


@lru_cache(maxsize=1)
def get_default_catalog() -> AssumptionCatalog:
    """Load the bundled catalog once per process."""
    return load_catalog()
