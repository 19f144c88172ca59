"""Stopword tables keyed by language tag, plus the shared negation set.

Tables come from the NLTK stopwords corpus. Entries are normalised to the
surface forms the tokenizer produces: lowercased, contractions merged
("don't" -> "dont"), and anything that is not a single ASCII word token
dropped, since it could never match.
"""

from __future__ import annotations
import logging
from functools import lru_cache
from typing import Iterable, Tuple

import nltk
from nltk.corpus import stopwords as nltk_stopwords

from promptpress.core.tokenization.tokenizer import is_word, merge_contractions

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "english"

# small english list for when the corpus can't be loaded
_FALLBACK = {
    "i", "me", "my", "we", "our", "you", "your", "he", "him", "his", "she",
    "her", "it", "its", "they", "them", "their", "what", "which", "who",
    "this", "that", "these", "those", "a", "an", "the", "and", "or", "but",
    "if", "while", "of", "at", "by", "for", "with", "about", "against",
    "between", "into", "through", "during", "before", "after", "to", "from",
    "in", "out", "on", "off", "over", "under", "again", "further", "then",
    "once", "here", "there", "all", "any", "both", "each", "few", "more",
    "most", "other", "some", "such", "no", "nor", "not", "only", "own",
    "same", "so", "than", "too", "very", "can", "will", "just", "don",
    "should", "now", "is", "am", "are", "was", "were", "be", "been",
    "being", "have", "has", "had", "do", "does", "did",
}

# Language-agnostic: these are kept even when a table lists them.
NEGATION_WORDS: frozenset[str] = frozenset(
    {
        # english, post contraction merge
        "no", "not", "nor", "never", "none", "nobody", "nothing", "neither",
        "nowhere", "cannot", "cant", "dont", "doesnt", "didnt", "isnt",
        "arent", "wasnt", "werent", "wont", "wouldnt", "shouldnt",
        "couldnt", "hasnt", "havent", "hadnt", "mustnt", "neednt",
        "mightnt", "shant", "aint", "without",
        # other languages
        "ni", "nunca", "nada", "ne", "pas", "jamais", "nicht", "kein",
        "keine", "nie", "non", "mai", "nem", "niet", "geen",
    }
)


def normalize_stopwords(words: Iterable[str]) -> Tuple[str, ...]:
    """Lowercase, merge contractions, keep ASCII word tokens; order kept, deduped."""
    out: list[str] = []
    seen: set[str] = set()
    for w in words:
        norm = merge_contractions(w.strip().lower())
        if is_word(norm) and norm not in seen:
            seen.add(norm)
            out.append(norm)
    return tuple(out)


def _ensure_corpus() -> bool:
    try:
        nltk.data.find("corpora/stopwords")
        return True
    except LookupError:
        nltk.download("stopwords", quiet=True)
    try:
        nltk.data.find("corpora/stopwords")
        return True
    except LookupError:
        logger.warning("❌ NLTK stopwords corpus unavailable, using built-in english list")
        return False


@lru_cache(maxsize=None)
def _corpus_languages() -> Tuple[str, ...]:
    if not _ensure_corpus():
        return ()
    return tuple(nltk_stopwords.fileids())


@lru_cache(maxsize=None)
def _load_table(language: str) -> Tuple[str, ...]:
    if language in _corpus_languages():
        return normalize_stopwords(nltk_stopwords.words(language))
    return normalize_stopwords(sorted(_FALLBACK))


def supported_languages() -> Tuple[str, ...]:
    """Corpus languages, english first. Only english without the corpus."""
    others = tuple(l for l in _corpus_languages() if l != DEFAULT_LANGUAGE)
    return (DEFAULT_LANGUAGE,) + others


def get_stopwords(language: str | None) -> Tuple[str, ...]:
    """Stopword table for `language`, english when the tag is unknown."""
    key = (language or DEFAULT_LANGUAGE).strip().lower()
    if key not in supported_languages():
        logger.debug(f"No stopword table for {key!r}, using {DEFAULT_LANGUAGE}")
        key = DEFAULT_LANGUAGE
    return _load_table(key)
