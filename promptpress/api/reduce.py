import logging

from fastapi import APIRouter

from promptpress.core.reduction.stats import get_compression_stats
from promptpress.core.stemming.factory import available_variants
from promptpress.core.stopword_removal.stopwords import supported_languages
from promptpress.messages.reduce_messages import (
    OPTIONS_SUCCESS,
    REDUCE_FAILED,
    REDUCE_SUCCESS,
    STATS_SUCCESS,
)
from promptpress.schemas.reduce import CompareRequest, ReduceRequest, ReduceResponse
from promptpress.services.reduction_service import ReductionService
from promptpress.middlewares.text_validators import validate_text_length
from promptpress.utils.exceptions import ServerError
from promptpress.utils.response_builder import success_response

router = APIRouter(prefix="/api/reduce", tags=["Reduction"])
logger = logging.getLogger(__name__)


def _service() -> ReductionService:
    return ReductionService()


@router.post("", response_model=ReduceResponse)
def reduce_text(req: ReduceRequest):
    """
    Reduce the text with the given options and report size stats and,
    unless `includeSavings` is false, token savings per model.
    """
    validate_text_length(req.text)
    try:
        result = _service().reduce(
            req.text, req.options.to_config(), with_savings=req.include_savings
        )
        return success_response(message=REDUCE_SUCCESS, data=result.to_dict())
    except Exception as e:
        logger.exception(f"Reduction failed: {e}")
        raise ServerError(code="REDUCE_FAILED", message=REDUCE_FAILED)


@router.post("/stats")
def compression_stats(req: CompareRequest):
    validate_text_length(req.original, req.compressed)
    stats = get_compression_stats(req.original, req.compressed)
    return success_response(message=STATS_SUCCESS, data=stats.to_dict())


@router.get("/options")
def reduce_options():
    return success_response(
        message=OPTIONS_SUCCESS,
        data={
            "languages": list(supported_languages()),
            "stemmers": list(available_variants()),
        },
    )
