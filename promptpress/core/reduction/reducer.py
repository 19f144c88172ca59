from __future__ import annotations
import logging
from typing import List, Optional

from promptpress.core.reduction.base import TextReducer
from promptpress.core.reduction.config import ReductionConfig
from promptpress.core.stemming.base import Stemmer
from promptpress.core.stemming.factory import get_stemmer
from promptpress.core.stopword_removal.config import StopwordConfig
from promptpress.core.stopword_removal.removal import DefaultStopwordRemover
from promptpress.core.tokenization.tokenizer import (
    RegexTokenizer,
    is_punctuation,
    is_word,
)

logger = logging.getLogger(__name__)


def join_tokens(tokens: List[str], remove_spaces: bool) -> str:
    """
    Reassemble tokens.

    With `remove_spaces` everything is glued together. Otherwise tokens are
    space separated, except that punctuation attaches to whatever precedes it.
    """
    if remove_spaces:
        return "".join(tokens)

    parts: List[str] = []
    for i, token in enumerate(tokens):
        if i > 0 and not is_punctuation(token):
            parts.append(" ")
        parts.append(token)
    return "".join(parts)


class DefaultTextReducer(TextReducer):
    """
    Adapter: merge contractions -> tokenize -> drop stopwords/punctuation
    -> stem -> reassemble. The order is fixed.
    """

    def __init__(self, config: ReductionConfig | None = None):
        self.cfg = config or ReductionConfig()
        self._tokenizer = RegexTokenizer()
        self._stopwords = DefaultStopwordRemover(
            StopwordConfig(
                language=self.cfg.language,
                custom_stopwords=set(self.cfg.custom_stopwords),
                exclude_stopwords=set(self.cfg.exclude_stopwords),
            )
        )
        self._stemmer: Optional[Stemmer] = (
            get_stemmer(self.cfg.stemmer) if self.cfg.use_stemming else None
        )

    def _process(self, tokens: List[str]) -> List[str]:
        out: List[str] = []
        for token in tokens:
            if is_punctuation(token):
                if not self.cfg.remove_punctuation:
                    out.append(token)
                continue

            if not is_word(token):
                continue

            if self._stemmer is not None:
                token = self._stemmer.stem(token)
            out.append(token)
        return out

    def reduce(self, text: str) -> str:
        # contraction merge happens inside the tokenizer, before splitting
        tokens = self._tokenizer.tokenize(text)
        removed: List[str] = []
        kept = tokens
        if self.cfg.remove_stopwords:
            kept, removed = self._stopwords.remove(kept)
        kept = self._process(kept)
        result = join_tokens(kept, self.cfg.remove_spaces)

        logger.debug(
            f"Reduced {len(text or '')} -> {len(result)} chars "
            f"({len(tokens)} tokens in, {len(removed)} stopwords, {len(kept)} kept)"
        )
        return result


def trim(text: str, config: ReductionConfig | None = None) -> str:
    """Reduce `text` according to `config` (defaults when omitted)."""
    return DefaultTextReducer(config).reduce(text)
