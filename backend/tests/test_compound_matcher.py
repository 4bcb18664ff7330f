"""
Unit tests for the compound-word boundary rule, isolated from catalogs.
"""
import pytest

from checker.matching.compound_matcher import (
    find_occurrences,
    first_matching_keyword,
    is_compound_match,
    matches_keyword,
)


def test_find_occurrences_all_positions():
    assert find_occurrences("eierei", "ei") == [0, 4]
    assert find_occurrences("nussnuss", "nuss") == [0, 4]
    assert find_occurrences("milch", "ei") == []
    assert find_occurrences("abc", "") == []


@pytest.mark.parametrize("word", [
    "ei", "spiegelei", "rührei", "hühnerei", "eierkuchen", "eierlikör", "bio ei", "ei-ersatz",
    "hühnereier", "wachteleier", "rühreier", "spiegeleier",
])
def test_short_keyword_accepted(word):
    assert matches_keyword(word, "ei") is True


@pytest.mark.parametrize("word", ["rindfleisch", "fleisch", "schweinefilet", "eis", "weizen", "zwiebel", "kleie"])
def test_short_keyword_rejected(word):
    assert matches_keyword(word, "ei") is False


def test_infix_rejected_but_suffix_in_same_text_accepted():
    """'fleisch' alone is rejected; a genuine egg word later in the text still matches."""
    assert matches_keyword("fleisch mit spiegelei", "ei") is True


def test_prefix_needs_linking_element():
    assert is_compound_match("eierkuchen", 0, "ei") is True
    assert is_compound_match("eisbein", 0, "ei") is False


@pytest.mark.parametrize("word", ["nuss", "walnuss", "nussecke", "haselnusskuchen", "nusszopf"])
def test_long_keyword_any_position(word):
    assert matches_keyword(word, "nuss") is True


def test_non_letter_is_boundary():
    assert matches_keyword("ei (bio)", "ei") is True
    assert matches_keyword("2 ei", "ei") is True


def test_first_matching_keyword_order():
    assert first_matching_keyword("erdnussbutter", ["milch", "butter"]) == "butter"
    assert first_matching_keyword("zucker", ["milch", "butter"]) is None
    assert first_matching_keyword("zucker", []) is None


def test_linking_element_inside_compound():
    """Plural stem 'eier' counts at any position, not only at the start of the word."""
    pos = find_occurrences("wachteleier", "ei")[-1]
    assert is_compound_match("wachteleier", pos, "ei") is True
    assert is_compound_match("rindfleisch", find_occurrences("rindfleisch", "ei")[0], "ei") is False
