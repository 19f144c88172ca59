from __future__ import annotations
import re
from typing import List

from promptpress.core.tokenization.base import Tokenizer

# ASCII word class plus apostrophe; anything else non-space is one token
_re_token = re.compile(r"[\w']+|[^\w\s]", re.ASCII)
_re_word = re.compile(r"[\w']+", re.ASCII)
_re_punct = re.compile(r"[^\w\s]", re.ASCII)
_re_contraction = re.compile(r"(\w)'(\w)", re.ASCII)


def tokenize(text: str) -> List[str]:
    if not text:
        return []
    return _re_token.findall(text)


def is_word(token: str) -> bool:
    return bool(token) and _re_word.fullmatch(token) is not None


def is_punctuation(token: str) -> bool:
    return len(token) == 1 and _re_punct.fullmatch(token) is not None


def merge_contractions(text: str) -> str:
    """Drop an apostrophe sitting between two word characters.

    "don't stop" -> "dont stop". Leading/trailing quotes are left alone.
    """
    if not text:
        return ""
    return _re_contraction.sub(r"\1\2", text)


class RegexTokenizer(Tokenizer):
    """Adapter: contraction merge, then regex word/punctuation split."""

    def tokenize(self, text: str) -> List[str]:
        return tokenize(merge_contractions(text or ""))
