from __future__ import annotations
from abc import ABC, abstractmethod


class TextReducer(ABC):
    """Port: shrink raw text into a denser, still readable string."""

    @abstractmethod
    def reduce(self, text: str) -> str: ...
