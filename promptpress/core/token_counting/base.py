from __future__ import annotations
from abc import ABC, abstractmethod


class TokenCounter(ABC):
    """Port: count the sub-word units an LLM would bill for `text`."""

    @abstractmethod
    def count(self, text: str) -> int: ...
