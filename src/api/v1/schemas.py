from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ...feed.models import Side


class CardResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    article_id: str = Field(..., alias="articleId", description="Article identifier (its canonical URL)")
    title: str
    source_id: str = Field(..., alias="sourceId", description="Source the slot was assembled for")
    source_name: str = Field(..., alias="sourceName")
    image_url: Optional[str] = Field(None, alias="imageUrl")
    url: str
    published_at: Optional[str] = Field(None, alias="publishedAt")
    side: Side


class ArticleResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str
    author: str = ""
    published_at: str = Field("", alias="publishedAt")
    html_content: str = Field("", alias="htmlContent")
    reading_time_sec: int = Field(0, alias="readingTimeSec")


class ReactionRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # Presence is checked by the endpoint so the client gets a single 400 message
    user_id: Optional[str] = Field(None, alias="userId")
    article_id: Optional[str] = Field(None, alias="articleId")
    emoji: Optional[str] = None
    ts: Optional[int] = Field(None, description="Client timestamp in epoch milliseconds")

    @field_validator("user_id", "article_id", "emoji", mode="before")
    @classmethod
    def numbers_as_text(cls, value: Any) -> Any:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value


class ReactionResponse(BaseModel):
    status: str = "ok"


class HealthResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    status: str
    timestamp: datetime
    news_api_key_present: bool = Field(..., alias="newsApiKeyPresent")
    database: str
