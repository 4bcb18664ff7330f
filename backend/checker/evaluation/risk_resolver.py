"""
Combine keyword and dish matches into one classification. Highest category severity wins.
"""
from typing import Iterable, Optional
import logging

from checker.catalog.allergen_registry import AllergenRegistry
from checker.catalog.catalog_schema import RiskLevel
from checker.models.classification import ClassificationResult, MatchOutcome

logger = logging.getLogger(__name__)


class RiskResolver:
    """
    Severity comes from each category's own configured level, never from food family:
    cheese (CAUTION) and milk (DANGEROUS) stay distinct even when both match.
    """

    def __init__(self, registry: Optional[AllergenRegistry] = None):
        self._registry = registry or AllergenRegistry()

    def max_level(self, category_ids: Iterable[str]) -> RiskLevel:
        level = RiskLevel.SAFE
        for cid in category_ids:
            sev = self._registry.severity(cid)
            if sev.rank > level.rank:
                level = sev
        return level

    def resolve(
        self,
        item: str,
        allergen_matches: Iterable[str],
        dish_matches: Iterable[str],
        suppressed: Iterable[str] = (),
        dishes: Iterable[str] = (),
    ) -> ClassificationResult:
        direct = self._registry.sort_ids(allergen_matches)
        combined = self._registry.sort_ids(set(direct) | set(dish_matches))
        suppressed_ids = self._registry.sort_ids(suppressed)

        if combined:
            outcome = MatchOutcome.ALLERGEN
            level = self.max_level(combined)
        elif suppressed_ids:
            outcome = MatchOutcome.SAFE_EXCEPTION
            level = RiskLevel.SAFE
        else:
            outcome = MatchOutcome.NOT_RECOGNIZED
            level = RiskLevel.SAFE

        return ClassificationResult(
            text=item,
            level=level,
            outcome=outcome,
            allergens=tuple(combined),
            direct_allergens=tuple(direct),
            suppressed=tuple(suppressed_ids),
            dishes=tuple(dishes),
        )
