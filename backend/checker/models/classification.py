"""
Per-item classification result. Single format for single checks, list checks and dish lookups.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from checker.catalog.catalog_schema import RiskLevel


class MatchOutcome(str, Enum):
    ALLERGEN = "allergen"
    SAFE_EXCEPTION = "safe_exception"
    NOT_RECOGNIZED = "not_recognized"


# Badge text shown by the client
LEVEL_LABELS: dict[RiskLevel, str] = {
    RiskLevel.DEADLY: "Lebensgefahr",
    RiskLevel.DANGEROUS: "Gefährlich",
    RiskLevel.CAUTION: "Vorsicht",
    RiskLevel.SAFE: "Sicher",
}
NOT_RECOGNIZED_LABEL = "Nicht erkannt"


def label_for(level: RiskLevel, outcome: MatchOutcome) -> str:
    if level == RiskLevel.SAFE and outcome == MatchOutcome.NOT_RECOGNIZED:
        return NOT_RECOGNIZED_LABEL
    return LEVEL_LABELS[level]


@dataclass(frozen=True)
class ClassificationResult:
    text: str
    level: RiskLevel
    outcome: MatchOutcome
    allergens: tuple[str, ...] = ()
    direct_allergens: tuple[str, ...] = ()  # matched by keyword, not via a dish
    suppressed: tuple[str, ...] = ()
    dishes: tuple[str, ...] = ()

    @property
    def label(self) -> str:
        return label_for(self.level, self.outcome)

    def to_dict(self) -> dict[str, Any]:
        return {
            "text": self.text,
            "level": self.level.value,
            "label": self.label,
            "outcome": self.outcome.value,
            "allergens": list(self.allergens),
            "direct_allergens": list(self.direct_allergens),
            "suppressed": list(self.suppressed),
            "dishes": list(self.dishes),
        }
