"""
Known-dish registry. Loads data/dishes.json once and checks every dish against the allergen registry.
"""
from pathlib import Path
from typing import Iterator, Optional
import logging

from .catalog_schema import CatalogError, DishEntry
from .allergen_registry import AllergenRegistry
from ._loader import load_catalog_json
from checker.config import get_dish_catalog_path

logger = logging.getLogger(__name__)


class DishRegistry:
    def __init__(
        self,
        dishes_path: Optional[Path] = None,
        allergen_registry: Optional[AllergenRegistry] = None,
    ):
        self._path = dishes_path or get_dish_catalog_path()
        self._dishes: tuple[DishEntry, ...] = ()
        self._load(allergen_registry)

    def _load(self, allergen_registry: Optional[AllergenRegistry]) -> None:
        _, entries = load_catalog_json(self._path, "dishes")
        seen: set[str] = set()
        dishes: list[DishEntry] = []
        for item in entries:
            dish = DishEntry.from_dict(item)
            key = dish.name.lower()
            if key in seen:
                logger.error("CATALOG duplicate dish name=%s path=%s", dish.name, self._path)
                raise CatalogError(f"duplicate dish {dish.name!r}")
            seen.add(key)
            dishes.append(dish)
        self._dishes = tuple(dishes)
        if allergen_registry is not None:
            self.check_allergen_ids(allergen_registry)
        logger.info("Loaded %d dishes from %s", len(self._dishes), self._path)

    def check_allergen_ids(self, allergen_registry: AllergenRegistry) -> None:
        """Raise CatalogError if any dish names a category the allergen registry does not define."""
        known_ids = set(allergen_registry.list_ids())
        for dish in self._dishes:
            unknown = [a for a in dish.allergens if a not in known_ids]
            if unknown:
                logger.error("CATALOG dish=%s references unknown categories=%s", dish.name, unknown)
                raise CatalogError(f"dish {dish.name!r} references unknown allergen categories {unknown}")

    def get(self, name: str) -> Optional[DishEntry]:
        """Exact dish lookup, case-insensitive."""
        key = (name or "").strip().lower()
        for dish in self._dishes:
            if dish.name.lower() == key:
                return dish
        return None

    def search(self, query: str) -> list[DishEntry]:
        """Dishes whose name contains query (case-insensitive); empty query lists all."""
        q = (query or "").strip().lower()
        if not q:
            return list(self._dishes)
        return [d for d in self._dishes if q in d.name.lower()]

    def __iter__(self) -> Iterator[DishEntry]:
        return iter(self._dishes)

    def __len__(self) -> int:
        return len(self._dishes)
