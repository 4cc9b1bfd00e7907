"""
Recent Searches API Endpoints
"""

from fastapi import APIRouter

from bandwatch.services.recent_searches import get_recent_searches

router = APIRouter()


@router.get("", response_model=list[str])
async def get_recent():
    """Recently analyzed tickers, most recent first."""
    return await get_recent_searches().get_all()


@router.delete("/{ticker}", response_model=list[str])
async def delete_recent(ticker: str):
    """Remove a ticker from the recent list."""
    return await get_recent_searches().remove(ticker.strip().upper())
