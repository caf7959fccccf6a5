from .enums import CostCategory
from .inputs import CostAssumptions, InputParams

__all__ = ["CostAssumptions", "CostCategory", "InputParams"]
