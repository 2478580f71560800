"""Value objects shared by the catalog, selector and assembler"""

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Optional, Dict, Any


class Side(str, Enum):
    """Ideological side a source is filed under"""
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


@dataclass(frozen=True)
class Source:
    """A configured news outlet with a fixed bias coordinate"""
    id: str
    name: str
    side: Side
    x: float
    y: float


@dataclass(frozen=True)
class Article:
    """Article as supplied by the news provider; identified by its URL"""
    url: str
    title: str
    source_id: Optional[str] = None
    image_url: Optional[str] = None
    published_at: Optional[str] = None

    @property
    def article_id(self) -> str:
        return self.url


@dataclass(frozen=True)
class Card:
    """One slot of the feed. Identity fields belong to the slot's source."""
    article_id: str
    title: str
    source_id: str
    source_name: str
    image_url: Optional[str]
    url: str
    published_at: Optional[str]
    side: Side

    @classmethod
    def for_source(cls, source: Source, article: Article) -> "Card":
        return cls(
            article_id=article.article_id,
            title=article.title,
            source_id=source.id,
            source_name=source.name,
            image_url=article.image_url,
            url=article.url,
            published_at=article.published_at,
            side=source.side,
        )

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["side"] = self.side.value
        return data
