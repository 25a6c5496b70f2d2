import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

logger = structlog.get_logger()

# Per-client limits; routes declare theirs with @limiter.limit(...)
limiter = Limiter(key_func=get_remote_address)


async def rate_limit_handler(request: Request, exc: Exception):
    """Answer 429 with a Retry-After header covering the limit's window."""
    if not isinstance(exc, RateLimitExceeded):
        raise exc

    retry_after = exc.limit.limit.get_expiry()
    logger.warning(
        "rate_limit_exceeded",
        path=request.url.path,
        limit=str(exc.limit.limit),
    )
    return JSONResponse(
        status_code=429,
        content={"detail": "Rate limit exceeded"},
        headers={"Retry-After": str(retry_after)},
    )


def setup_rate_limiter(app: FastAPI):
    """
    Attach the shared limiter and its 429 handler to the application.
    """
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_handler)


def get_limiter():
    """
    Returns the limiter instance.
    """
    return limiter
