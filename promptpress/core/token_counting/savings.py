from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional

from promptpress.core.token_counting.base import TokenCounter
from promptpress.core.token_counting.counter import get_default_counter
from promptpress.core.token_counting.pricing import (
    MODEL_PRICING,
    PER_MILLION,
    POPULAR_MODELS,
    ModelPricing,
)


@dataclass(frozen=True)
class TokenStats:
    token_count: int
    character_count: int
    tokens_per_char: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tokenCount": self.token_count,
            "characterCount": self.character_count,
            "tokensPerChar": self.tokens_per_char,
        }


@dataclass(frozen=True)
class CostEstimate:
    model: str
    input_cost: float
    output_cost: float
    total_cost: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "model": self.model,
            "inputCost": self.input_cost,
            "outputCost": self.output_cost,
            "totalCost": self.total_cost,
        }


@dataclass(frozen=True)
class TokenSavings:
    original_tokens: int
    compressed_tokens: int
    tokens_saved: int  # negative when reduction inflated the count
    percentage_saved: float
    cost_savings: List[CostEstimate] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "originalTokens": self.original_tokens,
            "compressedTokens": self.compressed_tokens,
            "tokensSaved": self.tokens_saved,
            "percentageSaved": self.percentage_saved,
            "costSavings": [c.to_dict() for c in self.cost_savings],
        }


def get_token_stats(text: str, counter: Optional[TokenCounter] = None) -> TokenStats:
    token_count = (counter or get_default_counter()).count(text)
    character_count = len(text)
    return TokenStats(
        token_count=token_count,
        character_count=character_count,
        tokens_per_char=token_count / character_count if character_count > 0 else 0.0,
    )


def calculate_cost(
    token_count: int,
    model: str,
    is_output: bool = False,
    use_cached: bool = False,
    pricing: Optional[Mapping[str, ModelPricing]] = None,
) -> float:
    """Cost in USD of `token_count` tokens. Raises KeyError for unknown models."""
    price = (MODEL_PRICING if pricing is None else pricing)[model]
    if is_output:
        per_million = price.output
    elif use_cached and price.cached is not None:
        per_million = price.cached
    else:
        per_million = price.input
    return token_count / PER_MILLION * per_million


def get_cost_estimates(
    input_tokens: int,
    output_tokens: int = 0,
    pricing: Optional[Mapping[str, ModelPricing]] = None,
) -> List[CostEstimate]:
    out: List[CostEstimate] = []
    for model, price in (MODEL_PRICING if pricing is None else pricing).items():
        input_cost = input_tokens / PER_MILLION * price.input
        output_cost = output_tokens / PER_MILLION * price.output
        out.append(
            CostEstimate(
                model=model,
                input_cost=input_cost,
                output_cost=output_cost,
                total_cost=input_cost + output_cost,
            )
        )
    return out


def calculate_token_savings(
    original: str,
    compressed: str,
    counter: Optional[TokenCounter] = None,
    pricing: Optional[Mapping[str, ModelPricing]] = None,
) -> TokenSavings:
    """
    Compare token counts of `original` and `compressed` and price the
    difference for every model. Only input prices are used; output_cost
    is always 0.
    """
    c = counter or get_default_counter()
    original_tokens = c.count(original)
    compressed_tokens = c.count(compressed)
    tokens_saved = original_tokens - compressed_tokens
    percentage_saved = (
        tokens_saved / original_tokens * 100 if original_tokens > 0 else 0.0
    )

    cost_savings: List[CostEstimate] = []
    for model, price in (MODEL_PRICING if pricing is None else pricing).items():
        original_cost = original_tokens * price.input / PER_MILLION
        compressed_cost = compressed_tokens * price.input / PER_MILLION
        saved = original_cost - compressed_cost
        cost_savings.append(
            CostEstimate(model=model, input_cost=saved, output_cost=0, total_cost=saved)
        )

    return TokenSavings(
        original_tokens=original_tokens,
        compressed_tokens=compressed_tokens,
        tokens_saved=tokens_saved,
        percentage_saved=percentage_saved,
        cost_savings=cost_savings,
    )


def sort_by_popularity(
    estimates: Iterable[CostEstimate], popular: Iterable[str] = POPULAR_MODELS
) -> List[CostEstimate]:
    """Popular models first in their listed order, the rest by total cost, desc."""
    rank = {m: i for i, m in enumerate(popular)}

    def key(e: CostEstimate):
        if e.model in rank:
            return (0, rank[e.model], 0.0)
        return (1, 0, -e.total_cost)

    return sorted(estimates, key=key)


def format_cost(amount: float) -> str:
    if amount < 0.0001:
        return "< $0.0001"
    if amount < 0.01:
        return f"${amount:.4f}"
    return f"${amount:.2f}"
