from __future__ import annotations

from promptpress.core.stemming.base import Stemmer
from promptpress.core.stemming.suffix_rules import aggressive_stem, light_stem


class LightStemmer(Stemmer):
    """Adapter: seven-stage Porter-style suffix stripping with measure gates."""

    def _stem_lower(self, word: str) -> str:
        return light_stem(word)


class ExtendedStemmer(Stemmer):
    """
    Adapter: reserved for a Porter2-style rule set.

    Currently runs the light rules, so output matches LightStemmer exactly.
    """

    def _stem_lower(self, word: str) -> str:
        return light_stem(word)


class AggressiveStemmer(Stemmer):
    """Adapter: single first-match pass, no measure gates. Shorter roots."""

    def _stem_lower(self, word: str) -> str:
        return aggressive_stem(word)
