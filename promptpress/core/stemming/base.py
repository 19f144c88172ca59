from __future__ import annotations
from abc import ABC, abstractmethod

MIN_STEM_INPUT_LEN = 3


def get_case_pattern(word: str) -> str:
    """One "U"/"L" per character of `word`."""
    return "".join("U" if c == c.upper() else "L" for c in word)


def restore_case(word: str, pattern: str) -> str:
    """Re-apply `pattern` positionally; positions past its end stay lowercase."""
    return "".join(
        c.upper() if i < len(pattern) and pattern[i] == "U" else c
        for i, c in enumerate(word)
    )


class Stemmer(ABC):
    """
    Port: reduce a single word to an approximate root.

    Subclasses only see lowercased input; the length floor and case
    restoration are handled here.
    """

    @abstractmethod
    def _stem_lower(self, word: str) -> str: ...

    def stem(self, word: str) -> str:
        if len(word) < MIN_STEM_INPUT_LEN:
            return word
        pattern = get_case_pattern(word)
        return restore_case(self._stem_lower(word.lower()), pattern)
