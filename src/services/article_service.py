from typing import Any, Dict

import structlog

from .cache_service import CacheService
from ..exceptions import ParsingError
from ..parsers.base_parser import BaseArticleParser
from ..utils.url_utils import encode_url_component, validate_url

logger = structlog.get_logger(__name__)


def article_cache_key(url: str) -> str:
    return f"article:{encode_url_component(url)}"


class ArticleService:

    def __init__(self, parser: BaseArticleParser, cache: CacheService, cache_ttl_seconds: int = 86400):
        self.parser = parser
        self.cache = cache
        self.cache_ttl_seconds = cache_ttl_seconds

    async def get_article(self, url: str) -> Dict[str, Any]:
        """Readable view of the article at ``url``.

        Raises:
            ValidationError: ``url`` is not an http(s) URL.
            ParsingError: the page could not be fetched or extracted.
        """
        validate_url(url)
        cache_key = article_cache_key(url)

        cached = self.cache.get(cache_key)
        if cached is not None:
            logger.info("article_cache_hit", url=url)
            return cached

        result = await self.parser.parse(url)
        if not result.success:
            raise ParsingError(result.error)

        article = result.to_dict()
        self.cache.set(cache_key, article, self.cache_ttl_seconds)
        return article
