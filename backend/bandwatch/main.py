"""
BandWatch Backend - FastAPI Application

Main entry point for the backend API.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from bandwatch.core.config import settings
from bandwatch.api.v1 import router as api_v1_router

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    """Root logger setup from settings.log_level."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    configure_logging()

    # Startup
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Data provider: {settings.data_provider}")

    # Recent search storage
    from bandwatch.services.cache.redis_client import init_redis, close_redis
    redis_client = await init_redis()
    if redis_client:
        logger.info("Redis connected")
    else:
        logger.info("Redis unavailable - recent searches kept in memory")

    yield

    # Shutdown
    logger.info("Shutting down...")
    await close_redis()


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="""
    BandWatch Bollinger Band Analysis API

    ## Architecture
    - **Data Ingestion**: Daily closes from Alpha Vantage or Yahoo Finance
    - **Indicator Engine**: 20-day moving average with 2σ bands (NumPy)
    - **Signal Evaluator**: Rule-based buy signal with entry/target/stop prices
    """,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

cors_origins = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]
# Add any additional origins from settings
if settings.allowed_origins:
    cors_origins.extend([o for o in settings.allowed_origins if o not in cors_origins])

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(api_v1_router, prefix="/api/v1")


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "app": settings.app_name,
        "version": settings.app_version,
        "environment": settings.environment,
        "data_provider": settings.data_provider,
    }


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "BandWatch Backend API",
        "docs": "/docs",
        "health": "/health",
    }
