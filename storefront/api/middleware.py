import logging
import time
from collections import deque
from typing import Deque, Dict, Tuple

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from storefront.api.responses import error_response
from storefront.core.exceptions import RateLimitException

logger = logging.getLogger("storefront.access")

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "Referrer-Policy": "no-referrer",
    "X-DNS-Prefetch-Control": "off",
    "Cross-Origin-Resource-Policy": "same-origin",
}


def client_address(request: Request) -> str:
    return request.client.host if request.client else "unknown"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            f'{client_address(request)} "{request.method} {request.url.path}" '
            f"{response.status_code} {elapsed_ms:.1f}ms"
        )
        return response


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        for name, value in SECURITY_HEADERS.items():
            response.headers.setdefault(name, value)
        return response


class RateLimiter:
    """Rolling-window request counter per client."""

    def __init__(self, max_requests: int, window_seconds: float, clock=time.monotonic):
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self.clock = clock
        self._hits: Dict[str, Deque[float]] = {}
        self._last_sweep = clock()

    def __len__(self) -> int:
        return len(self._hits)

    def _expire(self, hits: Deque[float], now: float) -> None:
        while hits and now - hits[0] >= self.window_seconds:
            hits.popleft()

    def _sweep(self, now: float) -> None:
        # drop clients whose hits have all left the window
        for key in list(self._hits):
            self._expire(self._hits[key], now)
            if not self._hits[key]:
                del self._hits[key]
        self._last_sweep = now

    def hit(self, key: str) -> Tuple[bool, int, int]:
        """Record one request. Returns (allowed, remaining, retry_after_seconds)."""
        now = self.clock()
        if now - self._last_sweep >= self.window_seconds:
            self._sweep(now)
        hits = self._hits.setdefault(key, deque())
        self._expire(hits, now)

        if len(hits) >= self.max_requests:
            retry_after = int(self.window_seconds - (now - hits[0])) + 1
            return False, 0, retry_after

        hits.append(now)
        return True, self.max_requests - len(hits), 0


class RateLimitMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, limiter: RateLimiter):
        super().__init__(app)
        self.limiter = limiter

    async def dispatch(self, request: Request, call_next):
        client = client_address(request)
        allowed, remaining, retry_after = self.limiter.hit(client)
        headers = {
            "RateLimit-Limit": str(self.limiter.max_requests),
            "RateLimit-Remaining": str(remaining),
        }
        if not allowed:
            exc = RateLimitException()
            logger.warning(f"Rate limit exceeded for {client} on {request.method} {request.url.path}")
            headers["Retry-After"] = str(retry_after)
            return error_response(request, exc.status_code, exc.message, headers=headers)

        response = await call_next(request)
        response.headers.update(headers)
        return response
