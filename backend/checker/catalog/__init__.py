from .catalog_schema import AllergenCategory, DishEntry, RiskLevel, RISK_RANK, CatalogError
from .allergen_registry import AllergenRegistry
from .dish_registry import DishRegistry

__all__ = [
    "AllergenCategory",
    "DishEntry",
    "RiskLevel",
    "RISK_RANK",
    "CatalogError",
    "AllergenRegistry",
    "DishRegistry",
]
