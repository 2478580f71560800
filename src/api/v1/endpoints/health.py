
import structlog
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from sqlalchemy import text

from ....core.database import get_db
from ....config import get_settings
from ..schemas import HealthResponse
from ....utils.date_utils import utc_now

logger = structlog.get_logger(__name__)

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check(db: Session = Depends(get_db)):
    try:
        db.execute(text("SELECT 1"))
        db_status = "healthy"
    except Exception as e:
        logger.error("Database health check failed", error=str(e))
        db_status = "unhealthy"

    return HealthResponse(
        status="ok" if db_status == "healthy" else "degraded",
        timestamp=utc_now(),
        news_api_key_present=bool(get_settings().newsapi_key),
        database=db_status
    )
