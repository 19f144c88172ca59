"""
Suffix-stripping rules shared by the stemmer adapters.

`light_stem` is a simplified Porter pass (seven ordered stages);
`AGGRESSIVE_RULES` is a single first-match table in the Lancaster spirit.
All functions expect lowercased input.
"""

from __future__ import annotations
import re
from typing import Tuple

_VOWELS = "aeiou"
_re_vowel = re.compile(r"[aeiou]")

# Stage 4: (suffix, replacement), gated by measure(stem) > 0
STAGE4_RULES: Tuple[Tuple[str, str], ...] = (
    ("ational", "ate"),
    ("tional", "tion"),
    ("enci", "ence"),
    ("anci", "ance"),
    ("izer", "ize"),
    ("abli", "able"),
    ("alli", "al"),
    ("entli", "ent"),
    ("eli", "e"),
    ("ousli", "ous"),
    ("ization", "ize"),
    ("ation", "ate"),
    ("ator", "ate"),
    ("alism", "al"),
    ("iveness", "ive"),
    ("fulness", "ful"),
    ("ousness", "ous"),
    ("aliti", "al"),
    ("iviti", "ive"),
    ("biliti", "ble"),
)

# Stage 5: same gate as stage 4
STAGE5_RULES: Tuple[Tuple[str, str], ...] = (
    ("icate", "ic"),
    ("ative", ""),
    ("alize", "al"),
    ("iciti", "ic"),
    ("ical", "ic"),
    ("ful", ""),
    ("ness", ""),
)

# Stage 6: pure removal, gated by measure(stem) > 1
STAGE6_SUFFIXES: Tuple[str, ...] = (
    "al", "ance", "ence", "er", "ic", "able", "ible", "ant", "ement",
    "ment", "ent", "ion", "ou", "ism", "ate", "iti", "ous", "ive", "ize",
)

# Longest / most specific first; first match wins, then stop.
AGGRESSIVE_RULES: Tuple[Tuple[str, str], ...] = (
    ("ational", "e"),
    ("iveness", "e"),
    ("fulness", "e"),
    ("ousness", "e"),
    ("ization", "e"),
    ("tional", "e"),
    ("biliti", "le"),
    ("icate", ""),
    ("ative", ""),
    ("alize", ""),
    ("iciti", ""),
    ("ical", ""),
    ("ness", ""),
    ("ance", ""),
    ("ence", ""),
    ("able", ""),
    ("ible", ""),
    ("ment", ""),
    ("sion", "t"),
    ("tion", "t"),
    ("ator", "e"),
    ("izer", ""),
    ("ing", ""),
    ("ed", ""),
    ("er", ""),
    ("ly", ""),
    ("y", "i"),
    ("es", ""),
    ("s", ""),
)
AGGRESSIVE_MIN_STEM = 2


def _is_consonant(c: str) -> bool:
    return c not in _VOWELS


def has_vowel(w: str) -> bool:
    return _re_vowel.search(w) is not None


def measure(w: str) -> int:
    """Count vowel-run -> consonant transitions, left to right."""
    count = 0
    prev_vowel = False
    for c in w:
        is_vowel = c in _VOWELS
        if not is_vowel and prev_vowel:
            count += 1
        prev_vowel = is_vowel
    return count


def ends_with_double_consonant(w: str) -> bool:
    return len(w) >= 2 and w[-1] == w[-2] and _is_consonant(w[-1])


def ends_with_cvc(w: str) -> bool:
    if len(w) < 3:
        return False
    c1, v, c2 = w[-3], w[-2], w[-1]
    return (
        _is_consonant(c1)
        and not _is_consonant(v)
        and _is_consonant(c2)
        and c2 not in "wxy"
    )


# --- light stages ---
def _step1a(w: str) -> str:
    if w.endswith("sses"):
        return w[:-2]
    if w.endswith("ies"):
        return w[:-2]
    if w.endswith("ss"):
        return w
    if w.endswith("s"):
        return w[:-1]
    return w


def _step1b_repair(w: str) -> str:
    if w.endswith(("at", "bl", "iz")):
        return w + "e"
    if ends_with_double_consonant(w) and w[-1] not in "lsz":
        return w[:-1]
    if measure(w) == 1 and ends_with_cvc(w):
        return w + "e"
    return w


def _step1b(w: str) -> str:
    if w.endswith("eed"):
        if measure(w[:-3]) > 0:
            return w[:-1]
        return w

    if w.endswith("ed"):
        stem = w[:-2]
        if has_vowel(stem):
            return _step1b_repair(stem)

    if w.endswith("ing"):
        stem = w[:-3]
        if has_vowel(stem):
            return _step1b_repair(stem)

    return w


def _step1c(w: str) -> str:
    if w.endswith("y") and has_vowel(w[:-1]):
        return w[:-1] + "i"
    return w


def _replace_gated(w: str, rules: Tuple[Tuple[str, str], ...]) -> str:
    # a matching suffix whose gate fails does not stop the scan
    for suffix, replacement in rules:
        if w.endswith(suffix):
            stem = w[: -len(suffix)]
            if measure(stem) > 0:
                return stem + replacement
    return w


def _strip_suffix(w: str) -> str:
    for suffix in STAGE6_SUFFIXES:
        if not w.endswith(suffix):
            continue
        stem = w[: -len(suffix)]
        if suffix == "ion" and not stem.endswith(("s", "t")):
            continue
        if measure(stem) > 1:
            return stem
    return w


def _tidy_ending(w: str) -> str:
    if w.endswith("e"):
        stem = w[:-1]
        m = measure(stem)
        if m > 1 or (m == 1 and not ends_with_cvc(stem)):
            return stem

    if w.endswith("ll") and measure(w) > 1:
        return w[:-1]

    return w


def light_stem(w: str) -> str:
    w = _step1a(w)
    w = _step1b(w)
    w = _step1c(w)
    w = _replace_gated(w, STAGE4_RULES)
    w = _replace_gated(w, STAGE5_RULES)
    w = _strip_suffix(w)
    w = _tidy_ending(w)
    return w


def aggressive_stem(w: str) -> str:
    for suffix, replacement in AGGRESSIVE_RULES:
        if w.endswith(suffix) and len(w) - len(suffix) >= AGGRESSIVE_MIN_STEM:
            return w[: -len(suffix)] + replacement
    return w
