import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

logger = logging.getLogger("access")

_PROBES = ("/", "/health", "/liveness", "/readiness")


class AccessLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        x_forwarded_for = request.headers.get("x-forwarded-for")
        ip = (
            x_forwarded_for.split(",")[0].strip()
            if x_forwarded_for
            else (request.client.host if request.client else "-")
        )

        path = request.url.path
        method = request.method
        user_agent = request.headers.get("user-agent", "")

        # Skip orchestrator probes without a user-agent
        if path in _PROBES and not user_agent:
            return await call_next(request)

        start = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000

        logger.info(
            f"🛰️ {method} {path} -> {response.status_code} ({elapsed_ms:.1f} ms)",
            extra={"ip": ip, "path": path, "method": method, "user_agent": user_agent},
        )
        return response
