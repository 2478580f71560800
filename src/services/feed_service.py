from typing import Any, Dict, List

import structlog

from .cache_service import CacheService
from .news_api_client import NewsApiClient
from ..feed import SourceCatalog, assemble_cards, select_sources
from ..feed.selector import DEFAULT_SLOT_COUNT

logger = structlog.get_logger(__name__)


def feed_cache_key(x: float, y: float) -> str:
    return f"feed:{x:.3f}:{y:.3f}"


class FeedService:
    """Builds the card feed for a bias coordinate"""

    def __init__(
        self,
        catalog: SourceCatalog,
        news_client: NewsApiClient,
        cache: CacheService,
        slot_count: int = DEFAULT_SLOT_COUNT,
        balance_sides: bool = True,
        cache_ttl_seconds: int = 1800,
    ):
        self.catalog = catalog
        self.news_client = news_client
        self.cache = cache
        self.slot_count = slot_count
        self.balance_sides = balance_sides
        self.cache_ttl_seconds = cache_ttl_seconds

    async def get_feed(self, x: float, y: float) -> List[Dict[str, Any]]:
        cache_key = feed_cache_key(x, y)

        cached = self.cache.get(cache_key)
        if cached is not None:
            logger.info("feed_cache_hit", cache_key=cache_key, cards=len(cached))
            return cached

        sources = select_sources(
            self.catalog,
            x,
            y,
            slot_count=self.slot_count,
            balance_sides=self.balance_sides,
        )
        logger.info(
            "feed_sources_selected",
            x=x,
            y=y,
            sources=[source.id for source in sources]
        )

        if not sources:
            return []

        articles = await self.news_client.get_articles_by_sources([source.id for source in sources])
        cards = [card.to_dict() for card in assemble_cards(sources, articles)]

        logger.info("feed_assembled", cache_key=cache_key, articles=len(articles), cards=len(cards))

        if cards:
            self.cache.set(cache_key, cards, self.cache_ttl_seconds)

        return cards
