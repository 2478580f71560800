import math
from typing import List, Optional

import structlog
from fastapi import APIRouter, Depends, HTTPException, Query

from ...dependencies import get_feed_service
from ..schemas import CardResponse
from ....services.feed_service import FeedService

logger = structlog.get_logger(__name__)

router = APIRouter()


def parse_coordinate(value: Optional[str]) -> Optional[float]:
    if value is None:
        return None
    try:
        number = float(value)
    except ValueError:
        return None
    return number if math.isfinite(number) else None


@router.get("/feed", response_model=List[CardResponse])
async def get_feed(
    x: Optional[str] = Query(None, description="Horizontal bias coordinate"),
    y: Optional[str] = Query(None, description="Vertical bias coordinate"),
    feed_service: FeedService = Depends(get_feed_service)
):
    """Balanced feed of cards for the reader's bias coordinate"""
    x_value = parse_coordinate(x)
    y_value = parse_coordinate(y)

    if x_value is None or y_value is None:
        raise HTTPException(status_code=400, detail={"error": "x and y required"})

    try:
        return await feed_service.get_feed(x_value, y_value)
    except Exception as e:
        logger.error("feed_request_failed", x=x_value, y=y_value, error=str(e), exc_info=e)
        raise HTTPException(
            status_code=500,
            detail={"error": "Failed to fetch articles", "details": str(e)}
        )
