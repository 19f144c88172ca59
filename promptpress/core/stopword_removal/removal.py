from __future__ import annotations
from typing import Set

from promptpress.core.stopword_removal.base import StopwordRemover
from promptpress.core.stopword_removal.config import StopwordConfig
from promptpress.core.stopword_removal.stopwords import (
    NEGATION_WORDS,
    get_stopwords,
    normalize_stopwords,
)
from promptpress.core.tokenization.tokenizer import is_word


class DefaultStopwordRemover(StopwordRemover):
    def __init__(self, config: StopwordConfig | None = None):
        self.cfg = config or StopwordConfig()
        self._stopset = self._build_stopset()

    def _build_stopset(self) -> Set[str]:
        base: Set[str] = set(get_stopwords(self.cfg.language))
        base |= set(normalize_stopwords(self.cfg.custom_stopwords))
        base -= set(normalize_stopwords(self.cfg.exclude_stopwords))
        return base

    @property
    def stopset(self) -> frozenset[str]:
        return frozenset(self._stopset)

    def is_stopword(self, token: str) -> bool:
        if not is_word(token):
            return False
        norm = token.lower()
        # negators survive regardless of the table
        return norm in self._stopset and norm not in NEGATION_WORDS
