from __future__ import annotations
from dataclasses import dataclass, field
from typing import Set


@dataclass(frozen=True)
class StopwordConfig:
    language: str = "english"  # unknown tags fall back to english
    custom_stopwords: Set[str] = field(default_factory=set)  # extra words to remove
    exclude_stopwords: Set[str] = field(
        default_factory=set
    )  # words to keep even if in list
