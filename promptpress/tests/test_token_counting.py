import logging

import pytest

from promptpress.core.token_counting import counter as counter_module
from promptpress.core.token_counting.counter import TiktokenCounter, count_tokens
from promptpress.core.token_counting.pricing import MODEL_PRICING, ModelPricing
from promptpress.core.token_counting.savings import (
    CostEstimate,
    calculate_cost,
    calculate_token_savings,
    format_cost,
    get_cost_estimates,
    get_token_stats,
    sort_by_popularity,
)


# -------------------------------------
# Counter boundary
# -------------------------------------
def test_empty_text_counts_zero_without_loading_encoding(monkeypatch):
    c = TiktokenCounter()

    def boom():
        raise AssertionError("encoding should not be loaded")

    monkeypatch.setattr(c, "_ensure_encoding", boom)
    assert c.count("") == 0


def test_counter_failure_is_logged_and_counts_zero(monkeypatch, caplog):
    c = TiktokenCounter("does-not-exist")

    def fail():
        raise ValueError("unknown encoding")

    monkeypatch.setattr(c, "_ensure_encoding", fail)
    with caplog.at_level(logging.ERROR):
        assert c.count("some text") == 0
    assert "Error loading encoding 'does-not-exist'" in caplog.text


def test_failed_encoding_load_is_not_retried(monkeypatch):
    calls = []

    def fail(name):
        calls.append(name)
        raise ValueError("no BPE file")

    monkeypatch.setattr(counter_module.tiktoken, "get_encoding", fail)
    c = TiktokenCounter("o200k_base")
    assert c.count("first") == 0
    assert c.count("second") == 0
    assert calls == ["o200k_base"]


def test_encode_failure_is_logged_and_counts_zero(monkeypatch, caplog):
    class BrokenEncoding:
        def encode(self, text, disallowed_special=()):
            raise RuntimeError("encoder error")

    c = TiktokenCounter()
    monkeypatch.setattr(c, "_enc", BrokenEncoding())
    with caplog.at_level(logging.ERROR):
        assert c.count("abc") == 0
    assert "Error counting tokens" in caplog.text


def test_counter_uses_loaded_encoding(monkeypatch):
    class FakeEncoding:
        def encode(self, text, disallowed_special=()):
            return list(text)

    c = TiktokenCounter()
    monkeypatch.setattr(c, "_enc", FakeEncoding())
    assert c.count("abc") == 3


def test_count_tokens_delegates_to_default_counter(fake_counter):
    assert count_tokens("one two three") == 3
    assert fake_counter.calls == ["one two three"]


def test_default_encoding_comes_from_settings(monkeypatch):
    monkeypatch.setattr(counter_module.settings, "TOKEN_ENCODING", "cl100k_base")
    assert TiktokenCounter().encoding_name == "cl100k_base"


# -------------------------------------
# Savings
# -------------------------------------
def test_savings_with_mocked_counter(counter_factory):
    counter = counter_factory({"original": 10, "short": 6})
    result = calculate_token_savings("original", "short", counter=counter)

    assert result.original_tokens == 10
    assert result.compressed_tokens == 6
    assert result.tokens_saved == 4
    assert result.percentage_saved == pytest.approx(40.0)
    assert len(result.cost_savings) == len(MODEL_PRICING)
    for estimate in result.cost_savings:
        price = MODEL_PRICING[estimate.model].input
        assert estimate.total_cost == pytest.approx((10 - 6) * price / 1_000_000)
        assert estimate.input_cost == estimate.total_cost
        assert estimate.output_cost == 0


def test_negative_savings_are_not_clamped(counter_factory):
    counter = counter_factory({"a": 4, "b": 5})
    result = calculate_token_savings("a", "b", counter=counter)
    assert result.tokens_saved == -1
    assert result.percentage_saved == pytest.approx(-25.0)
    assert all(e.total_cost < 0 for e in result.cost_savings)


def test_zero_original_tokens(counter_factory):
    counter = counter_factory({"x": 0, "y": 0})
    result = calculate_token_savings("x", "y", counter=counter)
    assert result.percentage_saved == 0
    assert result.tokens_saved == 0


def test_savings_with_injected_price_table(counter_factory):
    counter = counter_factory({"long": 2_000_000, "short": 1_000_000})
    pricing = {"house-model": ModelPricing(input=3.0, output=9.0)}
    result = calculate_token_savings("long", "short", counter=counter, pricing=pricing)
    assert [e.model for e in result.cost_savings] == ["house-model"]
    assert result.cost_savings[0].total_cost == pytest.approx(3.0)


def test_savings_with_empty_price_table(counter_factory):
    counter = counter_factory({"o": 10, "c": 6})
    result = calculate_token_savings("o", "c", counter=counter, pricing={})
    assert result.tokens_saved == 4
    assert result.cost_savings == []


def test_cost_helpers_respect_empty_price_table():
    assert get_cost_estimates(100, 10, pricing={}) == []
    with pytest.raises(KeyError):
        calculate_cost(10, "gpt-4o", pricing={})


def test_savings_to_dict(counter_factory):
    counter = counter_factory({"o": 10, "c": 6})
    pricing = {"m": ModelPricing(1.0, 2.0)}
    data = calculate_token_savings("o", "c", counter=counter, pricing=pricing).to_dict()
    assert data["tokensSaved"] == 4
    assert data["costSavings"][0]["model"] == "m"
    assert data["costSavings"][0]["outputCost"] == 0


# -------------------------------------
# Pricing helpers
# -------------------------------------
def test_calculate_cost():
    assert calculate_cost(1_000_000, "gpt-4o") == pytest.approx(2.5)
    assert calculate_cost(1_000_000, "gpt-4o", is_output=True) == pytest.approx(10.0)
    assert calculate_cost(1_000_000, "gpt-4o", use_cached=True) == pytest.approx(1.25)


def test_calculate_cost_without_cached_price_uses_input():
    assert calculate_cost(1_000_000, "o1-pro", use_cached=True) == pytest.approx(150.0)


def test_calculate_cost_unknown_model():
    with pytest.raises(KeyError):
        calculate_cost(10, "gpt-0")


def test_get_cost_estimates():
    estimates = {e.model: e for e in get_cost_estimates(1_000_000, 500_000)}
    gpt4o = estimates["gpt-4o"]
    assert gpt4o.input_cost == pytest.approx(2.5)
    assert gpt4o.output_cost == pytest.approx(5.0)
    assert gpt4o.total_cost == pytest.approx(7.5)
    assert set(estimates) == set(MODEL_PRICING)


def test_get_token_stats(counter_factory):
    stats = get_token_stats("abcd efgh", counter=counter_factory())
    assert stats.token_count == 2
    assert stats.character_count == 9
    assert stats.tokens_per_char == pytest.approx(2 / 9)
    assert get_token_stats("", counter=counter_factory()).tokens_per_char == 0


def test_sort_by_popularity():
    estimates = [
        CostEstimate("cheap", 0.1, 0, 0.1),
        CostEstimate("gpt-4o", 1.0, 0, 1.0),
        CostEstimate("pricey", 9.0, 0, 9.0),
        CostEstimate("gpt-4o-mini", 0.2, 0, 0.2),
    ]
    ordered = [e.model for e in sort_by_popularity(estimates)]
    assert ordered == ["gpt-4o-mini", "gpt-4o", "pricey", "cheap"]


@pytest.mark.parametrize(
    "amount,expected",
    [(0.00001, "< $0.0001"), (0.005, "$0.0050"), (0.01, "$0.01"), (1.234, "$1.23")],
)
def test_format_cost(amount, expected):
    assert format_cost(amount) == expected
