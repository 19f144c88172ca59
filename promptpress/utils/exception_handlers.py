import logging
import uuid

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from slowapi.errors import RateLimitExceeded

logger = logging.getLogger(__name__)


def _error(status_code: int, code: str, message: str, **extra) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": {"code": code, "message": message, **extra}},
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Expected HTTP errors (404, 413, ...) in the standard envelope."""
    if isinstance(exc.detail, dict):
        return _error(exc.status_code, exc.detail["code"], exc.detail["message"])
    return _error(exc.status_code, "HTTP_ERROR", str(exc.detail))


async def generic_exception_handler(request: Request, exc: Exception):
    """Unexpected errors become a 500 with a short reference id."""
    error_id = str(uuid.uuid4())[:8]
    logger.exception(f"💥 Error ID {error_id} for {request.url}: {exc}")
    return _error(
        500,
        "INTERNAL_SERVER_ERROR",
        f"Internal server error. Reference ID: {error_id}",
    )


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded):
    retry_after = getattr(exc, "retry_after", None) or 60
    return JSONResponse(
        status_code=429,
        content={
            "error": {
                "code": "RATE_LIMITED",
                "message": "You have exceeded the allowed number of requests. Please try again later.",
                "retry_after": retry_after,
            }
        },
        headers={"Retry-After": str(retry_after)},
    )
