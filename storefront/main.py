import logging
import time
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from storefront.api import orders, products, users
from storefront.api.error_handlers import register_error_handlers
from storefront.api.middleware import (
    RateLimiter,
    RateLimitMiddleware,
    RequestLoggingMiddleware,
    SecurityHeadersMiddleware,
)
from storefront.api.responses import utc_timestamp
from storefront.core.config import Settings, settings
from storefront.db.store import Store

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def create_app(app_settings: Optional[Settings] = None, store: Optional[Store] = None) -> FastAPI:
    app_settings = app_settings or settings
    configure_logging(app_settings.LOG_LEVEL)

    app = FastAPI(
        title=app_settings.APP_NAME,
        description="CRUD API over users, products and orders with validation, pagination and filtering.",
        version=app_settings.APP_VERSION,
        docs_url="/api-docs",
        redoc_url=None,
    )
    app.state.settings = app_settings
    app.state.store = store if store is not None else (Store.seeded() if app_settings.SEED_DATA else Store())
    app.state.started_at = time.monotonic()

    register_error_handlers(app)

    # last added runs first
    if app_settings.rate_limit_enabled:
        limiter = RateLimiter(app_settings.RATE_LIMIT_MAX_REQUESTS, app_settings.RATE_LIMIT_WINDOW_SECONDS)
        app.add_middleware(RateLimitMiddleware, limiter=limiter)
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.CORS_ORIGINS,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware)

    prefix = app_settings.API_PREFIX
    app.include_router(users.router, prefix=f"{prefix}/users", tags=["users"])
    app.include_router(products.router, prefix=f"{prefix}/products", tags=["products"])
    app.include_router(orders.router, prefix=f"{prefix}/orders", tags=["orders"])

    @app.get("/health", tags=["system"])
    async def health(request: Request):
        return {
            "status": "OK",
            "message": "API is running",
            "timestamp": utc_timestamp(),
            "uptime": round(time.monotonic() - request.app.state.started_at, 3),
        }

    @app.get("/", tags=["system"])
    async def root():
        return {
            "message": f"Welcome to {app_settings.APP_NAME}",
            "version": app_settings.APP_VERSION,
            "documentation": "/api-docs",
            "health": "/health",
            "endpoints": {
                "users": f"{prefix}/users",
                "products": f"{prefix}/products",
                "orders": f"{prefix}/orders",
            },
        }

    logger.info(
        f"{app_settings.APP_NAME} configured for {app_settings.ENVIRONMENT} "
        f"(prefix {prefix}, seeded={app_settings.SEED_DATA}, strict order status={app_settings.STRICT_ORDER_STATUS})"
    )
    return app


app = create_app()


def run() -> None:
    uvicorn.run("storefront.main:app", host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
