from typing import Dict

import pytest

from promptpress.core.token_counting import counter as counter_module
from promptpress.core.token_counting.base import TokenCounter


class FakeCounter(TokenCounter):
    """Counts whitespace-separated words unless a fixed answer is given."""

    def __init__(self, fixed: Dict[str, int] | None = None):
        self.fixed = fixed or {}
        self.calls: list[str] = []

    def count(self, text: str) -> int:
        self.calls.append(text)
        if text in self.fixed:
            return self.fixed[text]
        return len(text.split())


@pytest.fixture
def fake_counter(monkeypatch) -> FakeCounter:
    # replaces the tiktoken-backed default so tests never load a BPE file
    fake = FakeCounter()
    monkeypatch.setattr(counter_module, "_default_counter", fake)
    return fake


@pytest.fixture
def client(fake_counter):
    from fastapi.testclient import TestClient

    from promptpress.main import app
    from promptpress.middlewares.security import limiter

    limiter.enabled = False
    yield TestClient(app)
    limiter.enabled = True


@pytest.fixture
def counter_factory():
    return FakeCounter


@pytest.fixture
def stopword_corpus():
    """Skip when the NLTK stopwords corpus is not installed and can't be fetched."""
    from promptpress.core.stopword_removal import stopwords as stopwords_module

    if len(stopwords_module.supported_languages()) == 1:
        pytest.skip("NLTK stopwords corpus not available")
    return stopwords_module


@pytest.fixture
def no_stopword_corpus(monkeypatch):
    """Make the NLTK corpus look missing for the duration of a test."""
    import nltk

    from promptpress.core.stopword_removal import stopwords as stopwords_module

    def missing(*args, **kwargs):
        raise LookupError("corpora/stopwords")

    monkeypatch.setattr(nltk.data, "find", missing)
    monkeypatch.setattr(nltk, "download", lambda *args, **kwargs: False)
    stopwords_module._corpus_languages.cache_clear()
    stopwords_module._load_table.cache_clear()
    yield stopwords_module
    stopwords_module._corpus_languages.cache_clear()
    stopwords_module._load_table.cache_clear()
