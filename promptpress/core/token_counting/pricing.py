"""
Static price table, USD per million tokens.

`cached` is the discounted price for cached input tokens, None where the
provider does not offer one.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Optional


@dataclass(frozen=True)
class ModelPricing:
    input: float
    output: float
    cached: Optional[float] = None

    def to_dict(self) -> Dict[str, Optional[float]]:
        return {"input": self.input, "output": self.output, "cached": self.cached}


MODEL_PRICING: Dict[str, ModelPricing] = {
    # GPT-4.1 series
    "gpt-4.1": ModelPricing(2.00, 8.00, 0.50),
    "gpt-4.1-mini": ModelPricing(0.40, 1.60, 0.10),
    "gpt-4.1-nano": ModelPricing(0.10, 0.40, 0.025),
    # GPT-4.5 series
    "gpt-4.5-preview": ModelPricing(75.00, 150.00, 37.50),
    # GPT-4o series
    "gpt-4o": ModelPricing(2.50, 10.00, 1.25),
    "gpt-4o-mini": ModelPricing(0.15, 0.60, 0.075),
    # o1 series
    "o1": ModelPricing(15.00, 60.00, 7.50),
    "o1-pro": ModelPricing(150.00, 600.00, None),
    "o1-mini": ModelPricing(1.10, 4.40, 0.55),
    # o3 series
    "o3-pro": ModelPricing(20.00, 80.00, None),
    "o3": ModelPricing(2.00, 8.00, 0.50),
    "o3-mini": ModelPricing(1.10, 4.40, 0.55),
    # Anthropic
    "claude-opus-4": ModelPricing(15.00, 75.00, 1.50),
    "claude-sonnet-4": ModelPricing(3.00, 15.00, 0.30),
    "claude-sonnet-3.7": ModelPricing(3.00, 15.00, 0.30),
    "claude-sonnet-3.5": ModelPricing(3.00, 15.00, 0.30),
    "claude-haiku-3.5": ModelPricing(0.80, 4.00, 0.08),
    "claude-opus-3": ModelPricing(15.00, 75.00, 1.50),
    "claude-haiku-3": ModelPricing(0.25, 1.25, 0.03),
}

# shown first when savings are listed
POPULAR_MODELS = (
    "gpt-4o-mini",
    "gpt-4o",
    "claude-haiku-3.5",
    "claude-sonnet-3.5",
    "o3-mini",
    "gpt-4.1-mini",
)

PER_MILLION = 1_000_000
