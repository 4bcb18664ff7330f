"""
Allergen category registry. Loads data/allergens.json once; read-only afterwards.
Malformed data raises CatalogError so nothing is served from a partial catalog.
"""
from pathlib import Path
from types import MappingProxyType
from typing import Iterator, Optional
import logging

from .catalog_schema import AllergenCategory, CatalogError, RiskLevel
from ._loader import load_catalog_json
from checker.config import get_allergen_catalog_path

logger = logging.getLogger(__name__)


class AllergenRegistry:
    """
    Ordered allergen categories keyed by id. Definition order is the display
    order of matched allergens.
    """

    def __init__(self, catalog_path: Optional[Path] = None):
        self._path = catalog_path or get_allergen_catalog_path()
        self._version: str = "0"
        self._categories: tuple[AllergenCategory, ...] = ()
        self._by_id: MappingProxyType = MappingProxyType({})
        self._order: MappingProxyType = MappingProxyType({})
        self._load()

    def _load(self) -> None:
        data, entries = load_catalog_json(self._path, "categories")
        if not entries:
            raise CatalogError(f"catalog file {self._path}: no allergen categories defined")
        by_id: dict[str, AllergenCategory] = {}
        for item in entries:
            cat = AllergenCategory.from_dict(item)
            if cat.id in by_id:
                logger.error("CATALOG duplicate category id=%s path=%s", cat.id, self._path)
                raise CatalogError(f"duplicate allergen category id {cat.id!r}")
            by_id[cat.id] = cat
        self._version = str(data.get("catalog_version", "0"))
        self._categories = tuple(by_id.values())
        self._by_id = MappingProxyType(by_id)
        self._order = MappingProxyType({cid: i for i, cid in enumerate(by_id)})
        logger.info("Loaded %d allergen categories from %s", len(self._categories), self._path)

    def get(self, category_id: str) -> Optional[AllergenCategory]:
        return self._by_id.get(category_id)

    def list_ids(self) -> list[str]:
        return list(self._by_id.keys())

    def severity(self, category_id: str) -> RiskLevel:
        return self._by_id[category_id].severity

    def sort_ids(self, category_ids) -> list[str]:
        """Order ids by catalog definition order. Unknown ids are a catalog error."""
        ids = set(category_ids)
        unknown = sorted(cid for cid in ids if cid not in self._order)
        if unknown:
            logger.error("CATALOG unknown category ids=%s", unknown)
            raise CatalogError(f"unknown allergen category ids {unknown}")
        return sorted(ids, key=self._order.__getitem__)

    def get_version(self) -> str:
        return self._version

    def __iter__(self) -> Iterator[AllergenCategory]:
        return iter(self._categories)

    def __len__(self) -> int:
        return len(self._categories)
