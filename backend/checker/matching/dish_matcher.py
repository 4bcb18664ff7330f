"""
Dish fallback: unrecognized text that resembles a known dish inherits that dish's allergens.
"""
from dataclasses import dataclass, field
from typing import Optional
import logging

from checker.catalog.dish_registry import DishRegistry
from checker.config import get_dish_min_match_length
from checker.normalization.normalizer import normalize_key

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DishMatch:
    dishes: tuple[str, ...] = ()
    allergens: frozenset[str] = field(default_factory=frozenset)


def contains_either_way(item_key: str, dish_key: str, min_length: int) -> bool:
    """Bidirectional containment; the contained (shorter) side must reach min_length."""
    if item_key in dish_key:
        return len(item_key) >= min_length
    if dish_key in item_key:
        return len(dish_key) >= min_length
    return False


class DishMatcher:
    def __init__(self, registry: Optional[DishRegistry] = None, min_length: Optional[int] = None):
        self._registry = registry or DishRegistry()
        self._min_length = min_length if min_length is not None else get_dish_min_match_length()
        self._keys = tuple((normalize_key(d.name), d) for d in self._registry)

    @property
    def min_length(self) -> int:
        return self._min_length

    def match(self, item: str) -> DishMatch:
        key = normalize_key(item)
        if not key:
            return DishMatch()
        names: list[str] = []
        allergens: set[str] = set()
        for dish_key, dish in self._keys:
            if contains_either_way(key, dish_key, self._min_length):
                names.append(dish.name)
                allergens.update(dish.allergens)
        if names:
            logger.debug("DISH_FALLBACK item=%s dishes=%s allergens=%s", item, names, sorted(allergens))
        return DishMatch(dishes=tuple(names), allergens=frozenset(allergens))

    def match_dishes(self, item: str) -> set[str]:
        """Union of allergen ids of every dish matching item."""
        return set(self.match(item).allergens)
