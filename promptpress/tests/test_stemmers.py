import pytest

from promptpress.core.stemming.base import get_case_pattern, restore_case
from promptpress.core.stemming.factory import (
    available_variants,
    get_stemmer,
    resolve_variant,
)
from promptpress.core.stemming.stemmers import (
    AggressiveStemmer,
    ExtendedStemmer,
    LightStemmer,
)
from promptpress.core.stemming.suffix_rules import ends_with_cvc, measure

VARIANTS = ["light", "extended", "aggressive"]


# -------------------------------------
# Shared helpers
# -------------------------------------
@pytest.mark.parametrize(
    "word,expected",
    [
        ("tr", 0),
        ("ee", 0),
        ("tree", 0),
        ("trouble", 1),
        ("oats", 1),
        ("troubles", 2),
        ("private", 2),
        ("oaten", 2),
    ],
)
def test_measure(word, expected):
    assert measure(word) == expected


def test_ends_with_cvc():
    assert ends_with_cvc("hop")
    assert ends_with_cvc("fil")
    assert not ends_with_cvc("snow")  # final w
    assert not ends_with_cvc("box")  # final x
    assert not ends_with_cvc("tray")  # final y
    assert not ends_with_cvc("ho")


def test_case_pattern_roundtrip_with_length_change():
    pattern = get_case_pattern("RuNNing")
    assert pattern == "ULUULLL"
    assert restore_case("run", pattern) == "RuN"
    # positions past the pattern stay lowercase
    assert restore_case("abcdef", "UU") == "ABcdef"
    assert restore_case("", "UUU") == ""


# -------------------------------------
# Light
# -------------------------------------
@pytest.mark.parametrize(
    "word,expected",
    [
        ("caresses", "caress"),
        ("ponies", "poni"),
        ("cats", "cat"),
        ("running", "run"),
        ("hopping", "hop"),
        ("hoping", "hope"),
        ("agreed", "agre"),
        ("happy", "happi"),
        ("sky", "sky"),
        ("relational", "relat"),
        ("conditional", "condit"),
        ("generalization", "gener"),
        ("runners", "runner"),
        ("the", "the"),
    ],
)
def test_light_stemmer(word, expected):
    assert LightStemmer().stem(word) == expected


def test_light_ion_requires_s_or_t():
    # "opinion": stem "opin" ends in n, so "ion" is not removed
    assert LightStemmer().stem("opinion") == "opinion"
    # "adoption": stem "adopt" ends in t with measure 2
    assert LightStemmer().stem("adoption") == "adopt"


def test_extended_matches_light():
    words = [
        "caresses", "ponies", "running", "hoping", "agreed", "relational",
        "conditional", "generalization", "Happiness", "EFFECTIVELY",
    ]
    light, extended = LightStemmer(), ExtendedStemmer()
    assert [extended.stem(w) for w in words] == [light.stem(w) for w in words]


# -------------------------------------
# Aggressive
# -------------------------------------
@pytest.mark.parametrize(
    "word,expected",
    [
        ("running", "runn"),
        ("happiness", "happi"),
        ("nation", "nat"),
        ("relational", "rele"),
        ("cats", "cat"),
        ("quickly", "quick"),
        ("happy", "happi"),
        ("sing", "sing"),  # "ing" would leave a 1-char stem
        ("reading", "read"),
    ],
)
def test_aggressive_stemmer(word, expected):
    assert AggressiveStemmer().stem(word) == expected


def test_aggressive_applies_only_first_rule():
    # "es" is stripped, then the loop stops; the trailing "y"/"s" rules never run
    assert AggressiveStemmer().stem("boxes") == "box"


# -------------------------------------
# Contract shared by every variant
# -------------------------------------
@pytest.mark.parametrize("variant", VARIANTS)
@pytest.mark.parametrize("word", ["", "a", "is", "Go", "IT"])
def test_short_words_unchanged(variant, word):
    assert get_stemmer(variant).stem(word) == word


@pytest.mark.parametrize("variant", VARIANTS)
def test_case_preserved(variant):
    stemmer = get_stemmer(variant)
    lower = stemmer.stem("running")
    assert stemmer.stem("RUNNING") == lower.upper()
    assert stemmer.stem("Running") == lower[0].upper() + lower[1:]


@pytest.mark.parametrize("variant", VARIANTS)
def test_stem_is_deterministic(variant):
    stemmer = get_stemmer(variant)
    assert stemmer.stem("organizations") == stemmer.stem("organizations")


def test_mixed_case_word():
    assert LightStemmer().stem("McDonalds") == "McDonald"


# -------------------------------------
# Factory
# -------------------------------------
def test_get_stemmer_resolves_variants():
    assert isinstance(get_stemmer("light"), LightStemmer)
    assert isinstance(get_stemmer("extended"), ExtendedStemmer)
    assert isinstance(get_stemmer("aggressive"), AggressiveStemmer)


def test_get_stemmer_accepts_family_names():
    assert isinstance(get_stemmer("porter"), LightStemmer)
    assert isinstance(get_stemmer("snowball"), ExtendedStemmer)
    assert isinstance(get_stemmer("LANCASTER"), AggressiveStemmer)


def test_unknown_variant_falls_back_to_light():
    assert isinstance(get_stemmer("krovetz"), LightStemmer)
    assert isinstance(get_stemmer(None), LightStemmer)
    assert resolve_variant("") == "light"


def test_available_variants():
    assert available_variants() == ("light", "extended", "aggressive")
