from __future__ import annotations
from abc import ABC, abstractmethod
from typing import List


class Tokenizer(ABC):
    """Port: split raw text into an ordered list of word and punctuation tokens."""

    @abstractmethod
    def tokenize(self, text: str) -> List[str]: ...
