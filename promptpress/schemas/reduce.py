from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from promptpress.core.reduction.config import ReductionConfig
from promptpress.schemas.common import BaseResponse


class _CamelModel(BaseModel):
    # accept both "remove_spaces" and "removeSpaces"
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ReduceOptions(_CamelModel):
    remove_stopwords: bool = True
    remove_punctuation: bool = False
    remove_spaces: bool = True
    use_stemming: bool = False
    stemmer: str = "light"  # unknown values fall back to "light"
    language: str = "english"  # unknown values fall back to "english"
    custom_stopwords: List[str] = Field(default_factory=list)
    exclude_stopwords: List[str] = Field(default_factory=list)

    def to_config(self) -> ReductionConfig:
        return ReductionConfig(
            remove_stopwords=self.remove_stopwords,
            remove_punctuation=self.remove_punctuation,
            remove_spaces=self.remove_spaces,
            use_stemming=self.use_stemming,
            stemmer=self.stemmer,
            language=self.language,
            custom_stopwords=tuple(self.custom_stopwords),
            exclude_stopwords=tuple(self.exclude_stopwords),
        )


class ReduceRequest(_CamelModel):
    text: str
    options: ReduceOptions = Field(default_factory=ReduceOptions)
    include_savings: bool = True


class CompareRequest(_CamelModel):
    original: str
    compressed: str


class CountRequest(_CamelModel):
    text: str


class CompressionStatsData(_CamelModel):
    original_chars: int
    compressed_chars: int
    original_words: int
    compressed_words: int
    char_reduction: int


class CostEstimateData(_CamelModel):
    model: str
    input_cost: float
    output_cost: float
    total_cost: float


class TokenSavingsData(_CamelModel):
    original_tokens: int
    compressed_tokens: int
    tokens_saved: int
    percentage_saved: float
    cost_savings: List[CostEstimateData]


class ReduceData(_CamelModel):
    original: str
    reduced: str
    stats: CompressionStatsData
    savings: Optional[TokenSavingsData] = None
    options: ReduceOptions


class ReduceResponse(BaseResponse):
    data: ReduceData
