from __future__ import annotations
import logging
from typing import Optional

import tiktoken

from promptpress.core.config import settings
from promptpress.core.token_counting.base import TokenCounter

logger = logging.getLogger(__name__)


class TiktokenCounter(TokenCounter):
    """
    Adapter: counts tokens with a tiktoken BPE encoding.

    The encoding is loaded lazily on first use. Any failure (unknown
    encoding, missing BPE file, encoder error) is logged and counted as 0,
    so callers cannot tell a failed count from an empty text. A failed
    load is not retried; the counter keeps returning 0.
    """

    def __init__(self, encoding_name: str | None = None):
        self.encoding_name = encoding_name or settings.TOKEN_ENCODING
        self._enc: Optional[tiktoken.Encoding] = None
        self._load_failed = False

    def _ensure_encoding(self) -> tiktoken.Encoding:
        if self._enc is None:
            self._enc = tiktoken.get_encoding(self.encoding_name)
        return self._enc

    def count(self, text: str) -> int:
        if not text or self._load_failed:
            return 0
        try:
            enc = self._ensure_encoding()
        except Exception as e:
            self._load_failed = True
            logger.exception(f"Error loading encoding {self.encoding_name!r}: {e}")
            return 0
        try:
            return len(enc.encode(text, disallowed_special=()))
        except Exception as e:
            logger.exception(f"Error counting tokens: {e}")
            return 0


_default_counter: Optional[TokenCounter] = None


def get_default_counter() -> TokenCounter:
    global _default_counter
    if _default_counter is None:
        _default_counter = TiktokenCounter()
    return _default_counter


def count_tokens(text: str) -> int:
    return get_default_counter().count(text)
