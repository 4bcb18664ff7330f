"""
Deterministic normalization and list splitting. No stemming, no diacritic stripping.
"""
import re
import logging
from typing import List

logger = logging.getLogger(__name__)

# Comma, semicolon, newline, or the standalone word "und"
_ITEM_SEPARATOR = re.compile(r"[,;\n]|\bund\b", re.IGNORECASE)
# Numbered list marker at line start: "1. Mehl", "2) Eier"
_ENUMERATION_MARKER = re.compile(r"^\s*\d+[.)]\s+")


def normalize_key(text: str) -> str:
    """
    Matching/dedup key: lowercase, strip, collapse inner whitespace.
    str.lower() keeps "ß" intact (casefold would turn it into "ss").
    """
    if not text or not isinstance(text, str):
        return ""
    return " ".join(text.lower().split())


def _strip_enumeration(line: str) -> str:
    return _ENUMERATION_MARKER.sub("", line, count=1)


def split_items(raw_text: str) -> List[str]:
    """
    Split raw text into trimmed, non-empty pieces (duplicates kept).
    Enumeration markers are removed per line before splitting on separators.
    """
    if not raw_text or not isinstance(raw_text, str):
        return []
    pieces: List[str] = []
    for line in raw_text.splitlines():
        line = _strip_enumeration(line)
        for part in _ITEM_SEPARATOR.split(line):
            part = part.strip()
            if part:
                pieces.append(part)
    return pieces


def parse_items(raw_text: str) -> List[str]:
    """
    Split a multi-item blob into unique items, first-seen order and casing kept.

    'Mehl, Zucker, Eier, Vanille' -> ['Mehl', 'Zucker', 'Eier', 'Vanille']
    '1. Mehl\\n2. Eier'            -> ['Mehl', 'Eier']
    'Mehl, mehl, MEHL'            -> ['Mehl']
    """
    seen: set[str] = set()
    items: List[str] = []
    for piece in split_items(raw_text):
        key = normalize_key(piece)
        if key in seen:
            logger.debug("NORMALIZE duplicate dropped raw=%s key=%s", piece, key)
            continue
        seen.add(key)
        items.append(piece)
    return items
