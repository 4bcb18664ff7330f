"""
Catalog DSL for allergen categories and known dishes. All matching is data-driven; no hardcoded if/else.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class CatalogError(ValueError):
    """Raised when the allergen or dish catalog is missing or malformed."""


class RiskLevel(str, Enum):
    SAFE = "safe"
    CAUTION = "caution"
    DANGEROUS = "dangerous"
    DEADLY = "deadly"

    @property
    def rank(self) -> int:
        return RISK_RANK[self]


# Higher rank wins when several categories match the same item
RISK_RANK: dict[RiskLevel, int] = {
    RiskLevel.SAFE: 0,
    RiskLevel.CAUTION: 1,
    RiskLevel.DANGEROUS: 2,
    RiskLevel.DEADLY: 3,
}

# Severities a category may carry; SAFE is only ever a resolved outcome
CATEGORY_SEVERITIES = (RiskLevel.DEADLY, RiskLevel.DANGEROUS, RiskLevel.CAUTION)


def _parse_severity(value: Any, category_id: str) -> RiskLevel:
    if isinstance(value, RiskLevel):
        level = value
    else:
        try:
            level = RiskLevel(str(value).strip().lower())
        except ValueError:
            raise CatalogError(f"category {category_id!r}: unknown severity {value!r}") from None
    if level not in CATEGORY_SEVERITIES:
        raise CatalogError(f"category {category_id!r}: severity must be one of DEADLY, DANGEROUS, CAUTION")
    return level


def _parse_keywords(values: Any, category_id: str, field_name: str) -> tuple[str, ...]:
    if values is None:
        return ()
    if not isinstance(values, list):
        raise CatalogError(f"category {category_id!r}: {field_name} must be a list")
    out = []
    for v in values:
        kw = str(v).lower().strip() if v is not None else ""
        if not kw:
            raise CatalogError(f"category {category_id!r}: empty entry in {field_name}")
        out.append(kw)
    return tuple(dict.fromkeys(out))


@dataclass(frozen=True)
class AllergenCategory:
    """One allergen family with its trigger keywords and the keywords that override them."""
    id: str
    name: str
    severity: RiskLevel
    keywords: tuple[str, ...]
    safe_exceptions: tuple[str, ...] = field(default_factory=tuple)
    description: str = ""

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "severity": self.severity.name,
            "keywords": list(self.keywords),
            "safe_exceptions": list(self.safe_exceptions),
            "description": self.description,
        }

    @classmethod
    def from_dict(cls, d: dict) -> "AllergenCategory":
        if not isinstance(d, dict):
            raise CatalogError(f"category entry must be an object, got {type(d).__name__}")
        category_id = str(d.get("id") or "").strip()
        if not category_id:
            raise CatalogError("category without id")
        name = str(d.get("name") or "").strip()
        if not name:
            raise CatalogError(f"category {category_id!r}: missing name")
        keywords = _parse_keywords(d.get("keywords"), category_id, "keywords")
        if not keywords:
            raise CatalogError(f"category {category_id!r}: keywords must not be empty")
        return cls(
            id=category_id,
            name=name,
            severity=_parse_severity(d.get("severity"), category_id),
            keywords=keywords,
            safe_exceptions=_parse_keywords(d.get("safe_exceptions"), category_id, "safe_exceptions"),
            description=str(d.get("description") or "").strip(),
        )


@dataclass(frozen=True)
class DishEntry:
    name: str
    allergens: tuple[str, ...]

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "allergens": list(self.allergens),
        }

    @classmethod
    def from_dict(cls, d: dict) -> "DishEntry":
        if not isinstance(d, dict):
            raise CatalogError(f"dish entry must be an object, got {type(d).__name__}")
        name = str(d.get("name") or "").strip()
        if not name:
            raise CatalogError("dish without name")
        allergens = d.get("allergens") or []
        if not isinstance(allergens, list):
            raise CatalogError(f"dish {name!r}: allergens must be a list")
        return cls(
            name=name,
            allergens=tuple(dict.fromkeys(str(a).strip() for a in allergens)),
        )
