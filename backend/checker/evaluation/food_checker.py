"""
Classification engine. Single pipeline for single-item and list checks:
parse -> keyword match + dish fallback -> resolve, once per unique item.
Pure function of the catalog and the input text; safe to share across threads.
"""
from typing import List, Optional
import logging

from checker.catalog.allergen_registry import AllergenRegistry
from checker.catalog.dish_registry import DishRegistry
from checker.matching.allergen_matcher import AllergenMatcher
from checker.matching.dish_matcher import DishMatcher
from checker.evaluation.risk_resolver import RiskResolver
from checker.models.classification import ClassificationResult
from checker.normalization.normalizer import parse_items

logger = logging.getLogger(__name__)


class FoodChecker:
    """
    Catalogs are loaded once here (or injected) and never mutated.
    Construction fails with CatalogError when the catalog is malformed.
    """

    def __init__(
        self,
        allergen_registry: Optional[AllergenRegistry] = None,
        dish_registry: Optional[DishRegistry] = None,
        dish_min_length: Optional[int] = None,
    ):
        self._allergens = allergen_registry or AllergenRegistry()
        self._dishes = dish_registry or DishRegistry()
        self._dishes.check_allergen_ids(self._allergens)
        self._allergen_matcher = AllergenMatcher(self._allergens)
        self._dish_matcher = DishMatcher(self._dishes, min_length=dish_min_length)
        self._resolver = RiskResolver(self._allergens)

    @property
    def allergen_registry(self) -> AllergenRegistry:
        return self._allergens

    @property
    def dish_registry(self) -> DishRegistry:
        return self._dishes

    def classify_item(self, item: str) -> ClassificationResult:
        """Classify one already-parsed item."""
        allergen_match = self._allergen_matcher.match(item)
        dish_match = self._dish_matcher.match(item)
        result = self._resolver.resolve(
            item,
            allergen_match.matched,
            dish_match.allergens,
            suppressed=allergen_match.suppressed,
            dishes=dish_match.dishes,
        )
        logger.debug(
            "CLASSIFY item=%s level=%s outcome=%s allergens=%s dishes=%s",
            item, result.level.value, result.outcome.value, list(result.allergens), list(result.dishes),
        )
        return result

    def classify_all(self, text: str) -> List[ClassificationResult]:
        """One result per unique item of text, in first-seen order. Empty text -> []."""
        items = parse_items(text)
        if not items:
            return []
        results = [self.classify_item(item) for item in items]
        logger.info(
            "CLASSIFY_LIST count=%d levels=%s",
            len(results), [r.level.value for r in results],
        )
        return results

    def classify_single(self, text: str) -> Optional[ClassificationResult]:
        """First result of classify_all, or None for empty/whitespace input."""
        results = self.classify_all(text)
        return results[0] if results else None
