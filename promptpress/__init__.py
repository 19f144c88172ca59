from promptpress.core.reduction.config import ReductionConfig
from promptpress.core.reduction.reducer import DefaultTextReducer, trim
from promptpress.core.reduction.stats import CompressionStats, get_compression_stats
from promptpress.core.stemming.factory import get_stemmer
from promptpress.core.token_counting.counter import count_tokens
from promptpress.core.token_counting.pricing import MODEL_PRICING, ModelPricing
from promptpress.core.token_counting.savings import (
    TokenSavings,
    calculate_cost,
    calculate_token_savings,
    get_cost_estimates,
    get_token_stats,
)
from promptpress.core.tokenization.tokenizer import (
    is_punctuation,
    is_word,
    merge_contractions,
    tokenize,
)

__all__ = [
    "MODEL_PRICING",
    "CompressionStats",
    "DefaultTextReducer",
    "ModelPricing",
    "ReductionConfig",
    "TokenSavings",
    "calculate_cost",
    "calculate_token_savings",
    "count_tokens",
    "get_compression_stats",
    "get_cost_estimates",
    "get_stemmer",
    "get_token_stats",
    "is_punctuation",
    "is_word",
    "merge_contractions",
    "tokenize",
    "trim",
]
