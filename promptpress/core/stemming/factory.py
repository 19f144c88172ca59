from __future__ import annotations
import logging
from typing import Dict, Type

from promptpress.core.stemming.base import Stemmer
from promptpress.core.stemming.config import DEFAULT_VARIANT, VARIANT_ALIASES
from promptpress.core.stemming.stemmers import (
    AggressiveStemmer,
    ExtendedStemmer,
    LightStemmer,
)

logger = logging.getLogger(__name__)

_REGISTRY: Dict[str, Type[Stemmer]] = {
    "light": LightStemmer,
    "extended": ExtendedStemmer,
    "aggressive": AggressiveStemmer,
}


def resolve_variant(variant: str | None) -> str:
    key = (variant or DEFAULT_VARIANT).strip().lower()
    key = VARIANT_ALIASES.get(key, key)
    if key not in _REGISTRY:
        logger.debug(f"Unknown stemmer variant {variant!r}, using {DEFAULT_VARIANT}")
        return DEFAULT_VARIANT
    return key


def get_stemmer(variant: str | None = DEFAULT_VARIANT) -> Stemmer:
    return _REGISTRY[resolve_variant(variant)]()


def available_variants() -> tuple[str, ...]:
    return tuple(_REGISTRY)
