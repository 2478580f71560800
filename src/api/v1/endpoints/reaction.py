from typing import Any

import structlog
from fastapi import APIRouter, Body, Depends, HTTPException
from pydantic import ValidationError as PayloadValidationError

from ...dependencies import get_reaction_service
from ..schemas import ReactionRequest, ReactionResponse
from ....exceptions import ValidationError
from ....services.reaction_service import ReactionService

logger = structlog.get_logger(__name__)

router = APIRouter()

FIELDS_REQUIRED = {"error": "userId, articleId, and emoji required"}


def parse_reaction_payload(payload: Any) -> ReactionRequest:
    try:
        request = ReactionRequest.model_validate(payload if payload is not None else {})
    except PayloadValidationError as e:
        if any(error["loc"] and error["loc"][0] == "ts" for error in e.errors()):
            raise HTTPException(status_code=400, detail={"error": "ts must be epoch milliseconds"})
        raise HTTPException(status_code=400, detail=FIELDS_REQUIRED)

    if not request.user_id or not request.article_id or not request.emoji:
        raise HTTPException(status_code=400, detail=FIELDS_REQUIRED)
    return request


@router.post("/reaction", response_model=ReactionResponse)
async def create_reaction(
    payload: Any = Body(None),
    reaction_service: ReactionService = Depends(get_reaction_service)
):
    request = parse_reaction_payload(payload)

    try:
        reaction_service.save_reaction(
            user_id=request.user_id,
            article_id=request.article_id,
            emoji=request.emoji,
            ts=request.ts
        )
    except ValidationError as e:
        raise HTTPException(status_code=400, detail={"error": str(e)})
    except Exception as e:
        logger.error("reaction_request_failed", error=str(e))
        raise HTTPException(
            status_code=500,
            detail={"error": "Failed to save reaction", "details": str(e)}
        )

    return ReactionResponse(status="ok")
