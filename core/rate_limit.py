"""
Rate limiting for the public stats API.

Uses slowapi to enforce request limits per client address. Behind a proxy the
first X-Forwarded-For hop is treated as the client.
"""

from fastapi import Request, Response
from slowapi import Limiter
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded
from starlette.responses import JSONResponse

from core.settings import settings
from schemas.common import ApiStatus


def get_rate_limit_key(request: Request) -> str:
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return get_remote_address(request)


limiter = Limiter(key_func=get_rate_limit_key, enabled=settings.rate_limit_enabled)


async def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> Response:
    """Custom handler for rate limit exceeded errors."""
    return JSONResponse(
        status_code=429,
        content={
            "status": ApiStatus.RATE_LIMITED.value,
            "error": "Too Many Requests",
            "message": f"Rate limit exceeded: {exc.detail}",
            "data": None,
        },
    )


PUBLIC_RATE_LIMIT = settings.public_rate_limit
