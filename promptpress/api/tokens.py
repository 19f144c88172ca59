import logging

from fastapi import APIRouter, Query

from promptpress.core.token_counting.pricing import MODEL_PRICING
from promptpress.core.token_counting.savings import (
    calculate_cost,
    calculate_token_savings,
    get_cost_estimates,
    get_token_stats,
    sort_by_popularity,
)
from promptpress.messages.token_messages import (
    COST_ESTIMATES_SUCCESS,
    MODEL_NOT_FOUND,
    PRICING_SUCCESS,
    TOKEN_COUNT_SUCCESS,
    TOKEN_SAVINGS_SUCCESS,
)
from promptpress.schemas.reduce import CompareRequest, CountRequest
from promptpress.middlewares.text_validators import validate_text_length
from promptpress.utils.exceptions import NotFoundError
from promptpress.utils.response_builder import success_response

router = APIRouter(prefix="/api/tokens", tags=["Tokens"])
logger = logging.getLogger(__name__)


@router.post("/count")
def count(req: CountRequest):
    validate_text_length(req.text)
    stats = get_token_stats(req.text)
    return success_response(message=TOKEN_COUNT_SUCCESS, data=stats.to_dict())


@router.post("/savings")
def savings(req: CompareRequest):
    validate_text_length(req.original, req.compressed)
    result = calculate_token_savings(req.original, req.compressed)
    data = result.to_dict()
    data["costSavings"] = [c.to_dict() for c in sort_by_popularity(result.cost_savings)]
    return success_response(message=TOKEN_SAVINGS_SUCCESS, data=data)


@router.get("/pricing")
def pricing():
    return success_response(
        message=PRICING_SUCCESS,
        data={model: p.to_dict() for model, p in MODEL_PRICING.items()},
    )


@router.get("/estimates")
def estimates(
    input_tokens: int = Query(0, ge=0),
    output_tokens: int = Query(0, ge=0),
):
    data = [e.to_dict() for e in get_cost_estimates(input_tokens, output_tokens)]
    return success_response(message=COST_ESTIMATES_SUCCESS, data=data)


@router.get("/cost/{model}")
def model_cost(
    model: str,
    tokens: int = Query(..., ge=0),
    output: bool = False,
    cached: bool = False,
):
    try:
        cost = calculate_cost(tokens, model, is_output=output, use_cached=cached)
    except KeyError:
        raise NotFoundError(code="MODEL_NOT_FOUND", message=MODEL_NOT_FOUND)
    return success_response(
        message=PRICING_SUCCESS,
        data={"model": model, "tokens": tokens, "cost": cost},
    )
