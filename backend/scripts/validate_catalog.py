#!/usr/bin/env python3
"""
Load and validate the allergen and dish catalogs. Exit code 1 on any catalog error.
Usage: cd backend && python scripts/validate_catalog.py [--allergens PATH] [--dishes PATH]
"""
import argparse
import logging
import sys
from pathlib import Path

# Ensure backend is on path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Validate allergen and dish catalog files")
    parser.add_argument("--allergens", help="Path to allergens.json (default from config)")
    parser.add_argument("--dishes", help="Path to dishes.json (default from config)")
    args = parser.parse_args(argv)

    from checker.catalog import AllergenRegistry, CatalogError, DishRegistry

    try:
        allergens = AllergenRegistry(Path(args.allergens) if args.allergens else None)
        dishes = DishRegistry(Path(args.dishes) if args.dishes else None, allergen_registry=allergens)
    except CatalogError as e:
        logger.error("Catalog invalid: %s", e)
        return 1
    logger.info(
        "Catalog valid: version=%s categories=%d dishes=%d",
        allergens.get_version(), len(allergens), len(dishes),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
