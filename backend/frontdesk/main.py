"""
Front Desk API - Main Application Entry Point

A hotel front-desk booking engine exposing:
- Half-open date-range room availability
- Check-in / check-out / extension / payment lifecycle with invariant checks
- Room inventory and guest directory stores held in memory
- Structured logging with request correlation and Prometheus metrics
"""

from contextlib import asynccontextmanager
from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from frontdesk.core.config import get_settings
from frontdesk.core.errors import FrontDeskError
from frontdesk.core.logging import setup_logging, get_logger
from frontdesk.core.metrics import metrics_endpoint
from frontdesk.api.dependencies import get_front_desk
from frontdesk.api.router import api_router
from frontdesk.api.middleware import RequestLoggingMiddleware
from frontdesk.services.front_desk import FrontDesk, build_demo_front_desk, build_front_desk

settings = get_settings()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifecycle: build the in-memory front desk on startup."""
    setup_logging()

    logger.info(
        "application_starting",
        app=settings.APP_NAME,
        version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT,
    )

    if settings.SEED_DEMO_DATA:
        desk = build_demo_front_desk(enforce_single_occupancy=settings.ENFORCE_SINGLE_OCCUPANCY)
    else:
        desk = build_front_desk(enforce_single_occupancy=settings.ENFORCE_SINGLE_OCCUPANCY)
    app.state.front_desk = desk

    yield

    # State is in-memory only; nothing survives shutdown
    logger.info("application_shutdown", bookings=len(desk.bookings))


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Hotel front-desk booking and availability engine",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(RequestLoggingMiddleware)

app.include_router(api_router)


@app.exception_handler(FrontDeskError)
async def front_desk_error_handler(request: Request, exc: FrontDeskError):
    logger.info("request_rejected", error=type(exc).__name__, detail=exc.detail)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


@app.get("/health", tags=["Health"])
def health_check(desk: FrontDesk = Depends(get_front_desk)):
    """Health check endpoint for Docker and load balancers."""
    return {
        "status": "healthy",
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT,
        "store": {
            "rooms": len(desk.rooms),
            "guests": len(desk.guests),
            "bookings": len(desk.bookings),
        },
    }


@app.get("/metrics", tags=["Health"], include_in_schema=False)
def metrics():
    return metrics_endpoint()


@app.get("/", tags=["Root"])
def root():
    return {
        "message": f"Welcome to {settings.APP_NAME}",
        "version": settings.APP_VERSION,
        "docs": "/docs",
    }


def run() -> None:
    """Console entry point: serve the API with uvicorn."""
    import uvicorn

    uvicorn.run("frontdesk.main:app", host="0.0.0.0", port=8000, log_config=None)
