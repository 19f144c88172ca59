from __future__ import annotations
from abc import ABC, abstractmethod
from typing import List, Tuple


class StopwordRemover(ABC):
    """Port: decide which word tokens are stopwords and drop them."""

    @abstractmethod
    def is_stopword(self, token: str) -> bool: ...

    def remove(self, tokens: List[str]) -> Tuple[List[str], List[str]]:
        """
        Returns (kept_tokens, removed_stopwords), order preserved.
        """
        kept: List[str] = []
        removed: List[str] = []
        for t in tokens:
            if self.is_stopword(t):
                removed.append(t)
                continue
            kept.append(t)
        return kept, removed
