"""
API v1 Router

All API endpoints for the frontend.
"""

from fastapi import APIRouter

from app.api.v1.endpoints import market, indicators, options, analysis

router = APIRouter()

# Include all endpoint routers
router.include_router(market.router, prefix="/market", tags=["Market Data"])
router.include_router(indicators.router, prefix="/indicators", tags=["Indicators"])
router.include_router(options.router, prefix="/options", tags=["Options"])
router.include_router(analysis.router, prefix="/analysis", tags=["Analysis"])
