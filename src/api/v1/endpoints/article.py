from typing import Optional

import structlog
from fastapi import APIRouter, Depends, HTTPException, Query

from ...dependencies import get_article_service
from ..schemas import ArticleResponse
from ....exceptions import ValidationError
from ....services.article_service import ArticleService

logger = structlog.get_logger(__name__)

router = APIRouter()


@router.get("/article", response_model=ArticleResponse)
async def get_article(
    url: Optional[str] = Query(None, description="Article URL"),
    article_service: ArticleService = Depends(get_article_service)
):
    """Readable view of a news article"""
    if not url:
        raise HTTPException(status_code=400, detail={"error": "url required"})

    try:
        return await article_service.get_article(url)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail={"error": str(e)})
    except Exception as e:
        logger.error("article_request_failed", url=url, error=str(e))
        raise HTTPException(
            status_code=500,
            detail={"error": "Failed to parse article", "details": str(e)}
        )
