"""
Shared JSON loading for catalog files. Any problem reading a catalog is fatal.
"""
from pathlib import Path
import json
import logging

from .catalog_schema import CatalogError

logger = logging.getLogger(__name__)


def load_catalog_json(path: Path, list_key: str) -> tuple[dict, list]:
    """Read a catalog file; returns (whole document, entries under list_key)."""
    if not path.exists():
        logger.error("CATALOG missing file path=%s", path)
        raise CatalogError(f"catalog file not found: {path}")
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.error("CATALOG unreadable path=%s error=%s", path, e)
        raise CatalogError(f"catalog file {path} could not be read: {e}") from e
    if not isinstance(data, dict):
        raise CatalogError(f"catalog file {path}: top level must be an object")
    entries = data.get(list_key)
    if not isinstance(entries, list):
        raise CatalogError(f"catalog file {path}: {list_key!r} must be a list")
    return data, entries
