"""Tests for business-name matching."""
import pytest

from cacverify.core.matcher import business_names_match


NAMES = [
    "Techtasker Solutions",
    "Techtasker Solutions Limited",
    "TECHTASKER SOLUTIONS NIGERIA LIMITED",
    "Acme Nigeria Ltd",
    "Bluewave Logistics",
    "AB",
]


def test_exact_match_after_normalization():
    assert business_names_match("Acme Ltd.", "ACME LIMITED")


def test_containment():
    assert business_names_match("Techtasker Solutions", "Techtasker Solutions Limited")


def test_word_subset():
    assert business_names_match("Techtasker Solutions", "TECHTASKER SOLUTIONS NIGERIA LIMITED")
    assert business_names_match("Bluewave Logistics", "Bluewave Haulage and Logistics Services")


def test_short_words_are_ignored():
    assert not business_names_match("AB", "Techtasker Solutions Limited")


def test_different_names_do_not_match():
    assert not business_names_match("Bluewave Logistics", "Techtasker Solutions")


@pytest.mark.parametrize("name", NAMES)
def test_reflexive(name):
    assert business_names_match(name, name)


@pytest.mark.parametrize("a", NAMES)
@pytest.mark.parametrize("b", NAMES)
def test_symmetric(a, b):
    assert business_names_match(a, b) == business_names_match(b, a)


def test_custom_suffix_list():
    assert business_names_match("Acme International", "Acme Foods Limited")
    assert not business_names_match("Acme International", "Acme Foods Limited", suffixes=(" limited",))
