#!/usr/bin/env python3
"""
Classify ingredients from the command line.
Usage: cd backend && python scripts/check_items.py "Mehl, Zucker, Eier" [--file list.txt] [--json]
Without text or --file, reads the list from stdin.
"""
import argparse
import json
import logging
import sys
from pathlib import Path

# Ensure backend is on path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

logging.basicConfig(level=logging.WARNING)
logger = logging.getLogger(__name__)


def _read_input(args) -> str:
    if args.file:
        return Path(args.file).read_text(encoding="utf-8")
    if args.text:
        return "\n".join(args.text)
    return sys.stdin.read()


def main(argv=None):
    parser = argparse.ArgumentParser(description="Classify German ingredient names by allergen risk")
    parser.add_argument("text", nargs="*", help="Ingredient list; each argument is one line")
    parser.add_argument("--file", help="Read the ingredient list from a file")
    parser.add_argument("--json", action="store_true", help="Print results as JSON")
    args = parser.parse_args(argv)

    from checker.evaluation.food_checker import FoodChecker

    checker = FoodChecker()
    results = checker.classify_all(_read_input(args))
    if args.json:
        print(json.dumps([r.to_dict() for r in results], ensure_ascii=False, indent=2))
        return 0
    if not results:
        print("Keine Zutaten gefunden.")
        return 0
    for r in results:
        detail = ", ".join(r.allergens) or ", ".join(r.suppressed)
        print(f"{r.text}: {r.label}" + (f" ({detail})" if detail else ""))
    return 0


if __name__ == "__main__":
    sys.exit(main())
