"""
Security dependencies for the API: shared-secret header check and
per-client rate limiting.
"""

import logging
import secrets
import time
from collections import defaultdict, deque
from typing import Deque, Dict, NamedTuple, Optional

from fastapi import HTTPException, Request, Security, status
from fastapi.security import APIKeyHeader

from fraudshield_ai.config import settings

logger = logging.getLogger(__name__)

api_key_header = APIKeyHeader(name=settings.api_token_header, auto_error=False)


def _client_host(request: Request) -> str:
    return request.client.host if request.client else "unknown"


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "ApiKey"},
    )


async def verify_api_token(
    request: Request,
    api_key: Optional[str] = Security(api_key_header),
):
    """
    Shared-secret check on the configured header.

    An empty ``api_token`` setting disables the check.
    """
    if not settings.api_token:
        if settings.is_production:
            logger.warning("API token not configured in production mode!")
        return None

    client = _client_host(request)
    if not api_key:
        logger.warning("Missing API key from %s", client)
        raise _unauthorized(f"Missing API key. Provide {settings.api_token_header} header.")

    if not secrets.compare_digest(api_key.encode(), settings.api_token.encode()):
        logger.warning("Invalid API key from %s", client)
        raise _unauthorized("Invalid API key.")

    return api_key


class RateDecision(NamedTuple):
    allowed: bool
    remaining: int
    retry_after: int


class RateLimiter:
    """Sliding-window limiter keyed by client address. Per process only."""

    def __init__(self):
        self._hits: Dict[str, Deque[float]] = defaultdict(deque)

    def hit(self, key: str, limit: int, window: int) -> RateDecision:
        """Record one request for ``key`` unless the window is already full."""
        now = time.time()
        hits = self._hits[key]
        while hits and now - hits[0] >= window:
            hits.popleft()

        if len(hits) >= limit:
            retry_after = max(0, int(window - (now - hits[0])))
            return RateDecision(False, 0, retry_after)

        hits.append(now)
        return RateDecision(True, limit - len(hits), 0)

    def reset(self):
        self._hits.clear()


rate_limiter = RateLimiter()


async def check_rate_limit(request: Request):
    """Per-IP limit on scoring endpoints. A limit of 0 disables it."""
    limit = settings.rate_limit_requests
    if not limit:
        return

    client_ip = _client_host(request)
    decision = rate_limiter.hit(client_ip, limit, settings.rate_limit_window)

    request.state.rate_limit_remaining = decision.remaining
    request.state.rate_limit_limit = limit

    if not decision.allowed:
        logger.warning("Rate limit exceeded for %s", client_ip)
        raise HTTPException(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            detail=f"Rate limit exceeded. Try again in {decision.retry_after} seconds.",
            headers={
                "Retry-After": str(decision.retry_after),
                "X-RateLimit-Limit": str(limit),
                "X-RateLimit-Remaining": "0",
            },
        )
