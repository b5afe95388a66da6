from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from starlette.responses import Response
from starlette.middleware.base import BaseHTTPMiddleware
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError
from tumafast.api import quotes
from tumafast.core.config import settings
from tumafast.core.metrics import request_count, request_duration, get_metrics_text
import time
import logging

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


class MetricsMiddleware(BaseHTTPMiddleware):
    """Count quote and monitoring requests by path and status, and time them."""

    async def dispatch(self, request: Request, call_next):
        start_time = time.time()

        try:
            response = await call_next(request)
            duration = time.time() - start_time

            request_count.labels(
                method=request.method,
                endpoint=request.url.path,
                status=response.status_code
            ).inc()

            request_duration.labels(
                method=request.method,
                endpoint=request.url.path
            ).observe(duration)

            return response
        except Exception:
            duration = time.time() - start_time
            request_count.labels(
                method=request.method,
                endpoint=request.url.path,
                status=500
            ).inc()
            request_duration.labels(
                method=request.method,
                endpoint=request.url.path
            ).observe(duration)
            raise


def timezone_available() -> bool:
    try:
        ZoneInfo(settings.TIMEZONE)
    except (ZoneInfoNotFoundError, ValueError):
        return False
    return True


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Application starting...")

    if timezone_available():
        logger.info(f"Arrival estimates use timezone {settings.TIMEZONE}")
    else:
        logger.error(f"Unknown timezone {settings.TIMEZONE!r}; arrival estimates will fail")

    if settings.PRICING_STRICT_MODE:
        logger.info("Strict pricing mode: unknown vehicle classes and tiers are rejected")

    yield

    logger.info("Shutdown complete")


app = FastAPI(
    title=settings.API_TITLE,
    description=settings.API_DESCRIPTION,
    version=settings.API_VERSION,
    debug=settings.DEBUG,
    lifespan=lifespan
)

app.add_middleware(MetricsMiddleware)

app.include_router(quotes.router)


@app.get("/metrics", tags=["monitoring"])
async def metrics():
    return Response(
        content=get_metrics_text(),
        media_type="text/plain; version=0.0.4; charset=utf-8"
    )


@app.get("/health", tags=["monitoring"])
async def health_check():
    return {
        "status": "healthy",
        "service": settings.API_TITLE,
        "version": settings.API_VERSION,
        "pricing_mode": "strict" if settings.PRICING_STRICT_MODE else "permissive",
        "timezone": settings.TIMEZONE,
    }


@app.get("/readiness", tags=["monitoring"])
async def readiness_check():
    if not timezone_available():
        return JSONResponse(
            status_code=503,
            content={"ready": False, "reason": f"Timezone {settings.TIMEZONE} not available"}
        )

    return {
        "ready": True,
        "service": settings.API_TITLE
    }


@app.get("/", tags=["root"])
async def root():
    return {
        "message": settings.API_TITLE,
        "version": settings.API_VERSION,
        "docs": "/docs",
        "health": "/health",
        "metrics": "/metrics"
    }
