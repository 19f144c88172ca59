from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class ReductionConfig:
    remove_stopwords: bool = True
    remove_punctuation: bool = False
    remove_spaces: bool = True  # concatenate tokens with no separator at all
    use_stemming: bool = False
    stemmer: str = "light"  # "light" | "extended" | "aggressive"
    language: str = "english"  # stopword table; unknown tags use english
    custom_stopwords: Tuple[str, ...] = ()  # removed on top of the table
    exclude_stopwords: Tuple[str, ...] = ()  # kept even when the table lists them
