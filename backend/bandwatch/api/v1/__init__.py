"""
API v1 Router

All API endpoints for the frontend.
"""

from fastapi import APIRouter

from bandwatch.api.v1.endpoints import stock, recent

router = APIRouter()

# Include all endpoint routers
router.include_router(stock.router, prefix="/stock", tags=["Stock Analysis"])
router.include_router(recent.router, prefix="/recent", tags=["Recent Searches"])
