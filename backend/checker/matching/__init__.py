from .compound_matcher import find_occurrences, is_compound_match, matches_keyword
from .allergen_matcher import AllergenMatch, AllergenMatcher
from .dish_matcher import DishMatch, DishMatcher

__all__ = [
    "find_occurrences",
    "is_compound_match",
    "matches_keyword",
    "AllergenMatch",
    "AllergenMatcher",
    "DishMatch",
    "DishMatcher",
]
