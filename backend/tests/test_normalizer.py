"""
Unit tests: normalize_key and parse_items (separators, numbering, dedup).
Run from repo root: python -m pytest backend/tests/test_normalizer.py -v
"""
import pytest

from checker.normalization.normalizer import normalize_key, parse_items, split_items


def test_normalize_key_lowercase_and_whitespace():
    assert normalize_key("  Caesar   Salad ") == "caesar salad"


def test_normalize_key_keeps_umlauts_and_eszett():
    assert normalize_key("Eiweiß") == "eiweiß"
    assert normalize_key("RÜHREI") == "rührei"


def test_normalize_key_empty():
    assert normalize_key("") == ""
    assert normalize_key(None) == ""


def test_comma_separated():
    assert parse_items("Mehl, Zucker, Eier, Vanille") == ["Mehl", "Zucker", "Eier", "Vanille"]


def test_newline_separated_same_as_comma():
    assert parse_items("Mehl\nZucker\nEier\nVanille") == parse_items("Mehl, Zucker, Eier, Vanille")


def test_windows_newlines():
    assert parse_items("Mehl\r\nZucker") == ["Mehl", "Zucker"]


def test_numbered_list():
    assert parse_items("1. Mehl\n2. Eier") == ["Mehl", "Eier"]


def test_numbered_list_with_parenthesis():
    assert parse_items("1) Mehl\n2) Eier\n10) Salz") == ["Mehl", "Eier", "Salz"]


def test_number_without_marker_is_kept():
    """A quantity is not an enumeration marker."""
    assert parse_items("200 g Mehl") == ["200 g Mehl"]


def test_und_splits():
    assert parse_items("Mehl und Zucker") == ["Mehl", "Zucker"]
    assert parse_items("Mehl UND Zucker") == ["Mehl", "Zucker"]


def test_und_inside_word_does_not_split():
    assert parse_items("Hundekuchen") == ["Hundekuchen"]
    assert parse_items("Rindergrundbrühe") == ["Rindergrundbrühe"]


def test_semicolons():
    assert parse_items("Mehl; Zucker; Salz") == ["Mehl", "Zucker", "Salz"]


def test_mixed_separators():
    assert parse_items("Mehl, Zucker\nEier; Salz") == ["Mehl", "Zucker", "Eier", "Salz"]


def test_dedup_case_insensitive_first_casing_kept():
    assert parse_items("Mehl, mehl, MEHL") == ["Mehl"]


def test_dedup_whitespace_insensitive():
    assert parse_items("Caesar Salad, caesar  salad") == ["Caesar Salad"]


def test_dedup_preserves_first_seen_order():
    assert parse_items("Eier, Mehl, eier, Zucker, MEHL") == ["Eier", "Mehl", "Zucker"]


@pytest.mark.parametrize("raw", ["", "   ", "\n\n", ", ; ,", "und"])
def test_empty_input_yields_nothing(raw):
    assert parse_items(raw) == []


def test_single_line_single_item():
    assert parse_items("Spiegelei") == ["Spiegelei"]


def test_split_items_keeps_duplicates():
    assert split_items("Mehl, mehl") == ["Mehl", "mehl"]
