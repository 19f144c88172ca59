from __future__ import annotations
import logging
from dataclasses import dataclass, replace
from typing import Any, Dict, Mapping, Optional

from promptpress.core.reduction.base import TextReducer
from promptpress.core.reduction.config import ReductionConfig
from promptpress.core.reduction.reducer import DefaultTextReducer
from promptpress.core.reduction.stats import CompressionStats, get_compression_stats
from promptpress.core.token_counting.base import TokenCounter
from promptpress.core.token_counting.counter import get_default_counter
from promptpress.core.token_counting.pricing import MODEL_PRICING, ModelPricing
from promptpress.core.token_counting.savings import (
    TokenSavings,
    calculate_token_savings,
    sort_by_popularity,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReductionResult:
    original: str
    reduced: str
    stats: CompressionStats
    savings: Optional[TokenSavings]
    config: ReductionConfig

    def to_dict(self) -> Dict[str, Any]:
        return {
            "original": self.original,
            "reduced": self.reduced,
            "stats": self.stats.to_dict(),
            "savings": self.savings.to_dict() if self.savings else None,
            "options": {
                "removeStopwords": self.config.remove_stopwords,
                "removePunctuation": self.config.remove_punctuation,
                "removeSpaces": self.config.remove_spaces,
                "useStemming": self.config.use_stemming,
                "stemmer": self.config.stemmer,
                "language": self.config.language,
                "customStopwords": list(self.config.custom_stopwords),
                "excludeStopwords": list(self.config.exclude_stopwords),
            },
        }


class ReductionService:
    """
    Runs the reducer and derives size stats and token savings in one call.
    - reducer is built per call from the config unless one is injected
    - savings are skipped when `with_savings=False` (no token counting)
    """

    def __init__(
        self,
        counter: Optional[TokenCounter] = None,
        pricing: Optional[Mapping[str, ModelPricing]] = None,
    ):
        self.counter = counter or get_default_counter()
        self.pricing = MODEL_PRICING if pricing is None else pricing

    def reduce(
        self,
        text: str,
        config: Optional[ReductionConfig] = None,
        *,
        reducer: Optional[TextReducer] = None,
        with_savings: bool = True,
    ) -> ReductionResult:
        cfg = config or ReductionConfig()
        reduced = (reducer or DefaultTextReducer(cfg)).reduce(text)
        stats = get_compression_stats(text, reduced)

        savings = None
        if with_savings:
            raw = calculate_token_savings(
                text, reduced, counter=self.counter, pricing=self.pricing
            )
            savings = replace(raw, cost_savings=sort_by_popularity(raw.cost_savings))

        logger.info(
            f"Reduction done: {stats.original_chars} -> {stats.compressed_chars} chars "
            f"({stats.char_reduction}%)"
        )
        return ReductionResult(
            original=text,
            reduced=reduced,
            stats=stats,
            savings=savings,
            config=cfg,
        )
