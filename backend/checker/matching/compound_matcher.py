"""
Compound-word-aware keyword scanning for German food names.

German nouns concatenate freely, so a plain substring test over-matches
("ei" inside "Rindfleisch"). Every occurrence of a keyword is checked with
explicit boundary predicates on the characters around it:

- whole word:                 "Ei"
- end of a word (suffix):     "Spiegelei", "Rührei", "Walnuss"
- followed by a linking
  element, any position:      "Eierkuchen", "Hühnereier", "Wachteleier"
- long keyword, any position: "Haselnusskuchen", "Nussecke"

Short keywords found between two letters ("Schweinefilet") or as a bare
prefix ("Eis") are rejected.
"""
from typing import Iterable, List, Optional

# Keywords at least this long are accepted wherever they occur
LONG_KEYWORD_LENGTH = 4

# Fugenelemente that may follow a short keyword inside a compound
LINKING_ELEMENTS: tuple[str, ...] = ("er",)


def _is_letter(ch: str) -> bool:
    return ch.isalpha()


def find_occurrences(text: str, keyword: str) -> List[int]:
    """All start positions of keyword in text, overlapping occurrences included."""
    if not keyword:
        return []
    positions: List[int] = []
    start = text.find(keyword)
    while start != -1:
        positions.append(start)
        start = text.find(keyword, start + 1)
    return positions


def is_compound_match(text: str, start: int, keyword: str) -> bool:
    """True if the keyword occurrence at text[start:] sits on an accepted compound boundary."""
    end = start + len(keyword)
    ends_word = end >= len(text) or not _is_letter(text[end])

    # Whole word or compound suffix
    if ends_word:
        return True
    if len(keyword) >= LONG_KEYWORD_LENGTH:
        return True
    rest = text[end:]
    return any(rest.startswith(link) for link in LINKING_ELEMENTS)


def matches_keyword(text: str, keyword: str) -> bool:
    """text and keyword are expected lowercased."""
    return any(is_compound_match(text, pos, keyword) for pos in find_occurrences(text, keyword))


def first_matching_keyword(text: str, keywords: Iterable[str]) -> Optional[str]:
    for kw in keywords:
        if matches_keyword(text, kw):
            return kw
    return None
