"""
StockDash Backend - FastAPI Application

Main entry point for the backend API.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import Settings, settings
from app.api.v1 import router as api_v1_router

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"Environment: {settings.environment}")

    yield

    # Shutdown
    logger.info("Shutting down...")


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="""
    StockDash Stock Dashboard API

    ## Architecture
    - **Market Data**: Quotes and price history from Yahoo Finance
    - **Indicator Engine**: RSI, SMA and Bollinger Bands (pure Python/NumPy)
    - **Options Pricer**: Black-Scholes prices and Greeks
    - **Analysis**: Statistical price forecast and price-action sentiment

    ## Core Principles
    - Numeric results are deterministic and reproducible
    - Rejected inputs return a 400, never NaN or Infinity
    """,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)


# CORS middleware - allow the frontend and the Vite dev server
def build_cors_origins(config: Settings) -> list[str]:
    """Frontend URL first, followed by the dev server and extra origins."""
    origins = [config.frontend_url]
    for origin in ["http://localhost:5173", "http://127.0.0.1:5173", *config.allowed_origins]:
        if origin not in origins:
            origins.append(origin)
    return origins


cors_origins = build_cors_origins(settings)

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
    }


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "StockDash Backend API",
        "docs": "/docs",
        "health": "/health",
    }
