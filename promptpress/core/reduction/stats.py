from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class CompressionStats:
    original_chars: int
    compressed_chars: int
    original_words: int
    compressed_words: int
    char_reduction: int  # whole percent, may be negative

    def to_dict(self) -> Dict[str, int]:
        return {
            "originalChars": self.original_chars,
            "compressedChars": self.compressed_chars,
            "originalWords": self.original_words,
            "compressedWords": self.compressed_words,
            "charReduction": self.char_reduction,
        }


def count_words(text: str) -> int:
    return len(text.split()) if text else 0


def round_half_up(x: float) -> int:
    # 2.5 -> 3, -2.5 -> -2; round() would give banker's rounding
    return int(math.floor(x + 0.5))


def get_compression_stats(original: str, compressed: str) -> CompressionStats:
    original_chars = len(original)
    compressed_chars = len(compressed)
    char_reduction = (
        round_half_up((original_chars - compressed_chars) / original_chars * 100)
        if original_chars > 0
        else 0
    )
    return CompressionStats(
        original_chars=original_chars,
        compressed_chars=compressed_chars,
        original_words=count_words(original),
        compressed_words=count_words(compressed),
        char_reduction=char_reduction,
    )
