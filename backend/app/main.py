"""
Eventify API - Main Application Entry Point

Event and booking backend meant to run behind a reverse proxy:
- Events with soft/hard delete cascading into their bookings
- Bookings with lenient input normalization and one-way cancellation
- Uniform {"ok": ..., "error": ...} response envelope
- Structured logging with request correlation and Prometheus metrics

Security headers, CORS and rate limiting are configured on the proxy.
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone

import uvicorn
from fastapi import FastAPI

from app.core.config import get_settings
from app.core.errors import register_exception_handlers
from app.core.logging import setup_logging, get_logger
from app.core.metrics import metrics_endpoint
from app.api.router import api_router
from app.api.middleware import RequestLoggingMiddleware
from app.db.session import init_models, dispose_engine

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifecycle: startup and shutdown hooks."""
    setup_logging()
    logger = get_logger(__name__)

    logger.info(
        "application_starting",
        app=settings.APP_NAME,
        version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT,
    )

    if settings.AUTO_CREATE_TABLES:
        await init_models()

    yield

    await dispose_engine()
    logger.info("application_shutdown")


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Event booking API with soft/hard event deletion and booking cancellation",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

register_exception_handlers(app)
app.add_middleware(RequestLoggingMiddleware)
app.include_router(api_router)


@app.get("/", tags=["Root"])
async def root():
    return {
        "ok": True,
        "service": settings.SERVICE_NAME,
        "time": datetime.now(timezone.utc).isoformat(),
    }


@app.get("/metrics", tags=["Metrics"], include_in_schema=False)
async def metrics():
    return metrics_endpoint()


def run() -> None:
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        proxy_headers=True,
        forwarded_allow_ips="*",
    )


if __name__ == "__main__":
    run()
