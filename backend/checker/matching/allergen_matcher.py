"""
Keyword matching of one item against every allergen category.
Two passes per category: triggers first, then safe exceptions, which always win.
"""
from dataclasses import dataclass, field
from typing import Optional
import logging

from checker.catalog.allergen_registry import AllergenRegistry
from checker.normalization.normalizer import normalize_key
from .compound_matcher import first_matching_keyword

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AllergenMatch:
    matched: frozenset[str] = field(default_factory=frozenset)
    suppressed: frozenset[str] = field(default_factory=frozenset)
    # category id -> trigger keyword that fired (suppressed categories included)
    triggers: tuple[tuple[str, str], ...] = ()


class AllergenMatcher:
    def __init__(self, registry: Optional[AllergenRegistry] = None):
        self._registry = registry or AllergenRegistry()

    def match(self, item: str) -> AllergenMatch:
        text = normalize_key(item)
        if not text:
            return AllergenMatch()
        matched: set[str] = set()
        suppressed: set[str] = set()
        triggers: list[tuple[str, str]] = []
        for category in self._registry:
            trigger = first_matching_keyword(text, category.keywords)
            if trigger is None:
                continue
            triggers.append((category.id, trigger))
            exception = first_matching_keyword(text, category.safe_exceptions)
            if exception is not None:
                logger.debug(
                    "SAFE_EXCEPTION item=%s category=%s trigger=%s exception=%s",
                    item, category.id, trigger, exception,
                )
                suppressed.add(category.id)
                continue
            matched.add(category.id)
        return AllergenMatch(
            matched=frozenset(matched),
            suppressed=frozenset(suppressed),
            triggers=tuple(triggers),
        )

    def match_allergens(self, item: str) -> set[str]:
        """Category ids triggered by item and not suppressed by a safe exception."""
        return set(self.match(item).matched)
