from contextlib import asynccontextmanager
import logging
from fastapi import FastAPI, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from promptpress.api import reduce, tokens
from promptpress.core.stopword_removal.stopwords import supported_languages
from promptpress.core.token_counting.counter import get_default_counter
from promptpress.middlewares.access_logger import AccessLoggingMiddleware
from promptpress.middlewares.logging import setup_logging
from promptpress.middlewares.security import (
    SecurityHeadersMiddleware,
    add_cors_middleware,
    add_rate_limit,
)
from promptpress.utils.exception_handlers import (
    generic_exception_handler,
    http_exception_handler,
)
from promptpress.core.config import settings


is_ready = False


@asynccontextmanager
async def lifespan(app: FastAPI):
    global is_ready

    # Load the BPE table up front; on failure counts degrade to 0
    warm = get_default_counter().count("warm up")
    if warm > 0:
        logging.getLogger(__name__).info("✅ Token counter ready")
    else:
        logging.getLogger(__name__).warning(
            "❌ Token counter unavailable, token savings will report 0"
        )
    languages = supported_languages()
    logging.getLogger(__name__).info(
        f"✅ Stopword tables available for {len(languages)} language(s)"
    )
    is_ready = True

    yield


# ✅ SETUP LOGGING FIRST
setup_logging()


app = FastAPI(
    title="PromptPress API",
    description="Shrink prompts before sending them to LLM APIs, and see what it saves",
    version=settings.SERVICE_VERSION,
    lifespan=lifespan,
    debug=(not settings.ENV == "production"),
)


# ===============
# Middlewares
# ===============
add_cors_middleware(app)
add_rate_limit(app)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(AccessLoggingMiddleware)


# ===============
# Routers
# ===============
app.include_router(reduce.router)
app.include_router(tokens.router)


# ===============
# Health Checks
# ===============
@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/liveness", status_code=204)
def liveness():
    return Response(status_code=204)


@app.api_route("/readiness", methods=["GET", "HEAD"], status_code=200)
def readiness():
    return {"status": "ready"} if is_ready else Response(status_code=503)


# ===============
# Global Error Handlers
# ===============
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(Exception, generic_exception_handler)
