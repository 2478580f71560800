from functools import lru_cache

from fastapi import Depends
from sqlalchemy.orm import Session

from ..core.database import get_db
from ..config import get_settings
from ..feed import SourceCatalog, load_catalog
from ..parsers.article_parser import ArticleParser
from ..repositories.cache_repository import CacheRepository
from ..repositories.reaction_repository import ReactionRepository
from ..services.article_service import ArticleService
from ..services.cache_service import CacheService
from ..services.feed_service import FeedService
from ..services.news_api_client import NewsApiClient
from ..services.reaction_service import ReactionService


@lru_cache()
def get_source_catalog() -> SourceCatalog:
    return load_catalog(get_settings().source_catalog_path)


def get_news_api_client() -> NewsApiClient:
    settings = get_settings()
    return NewsApiClient(
        api_key=settings.newsapi_key,
        base_url=settings.newsapi_base_url,
        timeout_seconds=settings.http_timeout_seconds,
        page_size=settings.newsapi_page_size
    )


def get_article_parser() -> ArticleParser:
    return ArticleParser(timeout_seconds=get_settings().http_timeout_seconds)


def get_cache_service(db: Session = Depends(get_db)) -> CacheService:
    return CacheService(CacheRepository(db), enabled=get_settings().cache_enabled)


def get_feed_service(
    catalog: SourceCatalog = Depends(get_source_catalog),
    news_client: NewsApiClient = Depends(get_news_api_client),
    cache: CacheService = Depends(get_cache_service)
) -> FeedService:
    settings = get_settings()
    return FeedService(
        catalog=catalog,
        news_client=news_client,
        cache=cache,
        slot_count=settings.feed_slot_count,
        balance_sides=settings.feed_balance_sides,
        cache_ttl_seconds=settings.feed_cache_ttl_seconds
    )


def get_article_service(
    parser: ArticleParser = Depends(get_article_parser),
    cache: CacheService = Depends(get_cache_service)
) -> ArticleService:
    return ArticleService(parser, cache, cache_ttl_seconds=get_settings().article_cache_ttl_seconds)


def get_reaction_service(db: Session = Depends(get_db)) -> ReactionService:
    return ReactionService(ReactionRepository(db))
