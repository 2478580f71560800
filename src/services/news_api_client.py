from typing import Any, Dict, List, Optional, Sequence

import httpx
import structlog

from ..exceptions import NewsProviderError
from ..feed.models import Article

logger = structlog.get_logger(__name__)


class NewsApiClient:
    """Client for the NewsAPI top-headlines endpoint"""

    DEFAULT_BASE_URL = "https://newsapi.org/v2"
    DEFAULT_TIMEOUT_SECONDS = 15.0
    DEFAULT_PAGE_SIZE = 50

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = DEFAULT_BASE_URL,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        page_size: int = DEFAULT_PAGE_SIZE,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self.page_size = page_size

    async def get_articles_by_sources(self, source_ids: Sequence[str]) -> List[Article]:
        if not source_ids:
            return []

        if not self.api_key:
            raise NewsProviderError("NEWSAPI_KEY is not configured")

        params = {
            "sources": ",".join(source_ids),
            "pageSize": self.page_size,
        }
        payload = await self._get("/top-headlines", params)

        if payload.get("status") == "error":
            raise NewsProviderError(
                f"NewsAPI error {payload.get('code', 'unknown')}: {payload.get('message', '')}".strip()
            )

        articles = [
            article
            for article in (self._map_article(raw) for raw in payload.get("articles") or [])
            if article is not None
        ]
        logger.info(
            "news_articles_fetched",
            sources=list(source_ids),
            total_results=payload.get("totalResults"),
            articles=len(articles)
        )
        return articles

    async def _get(self, path: str, params: Dict[str, Any]) -> Dict[str, Any]:
        url = f"{self.base_url}{path}"

        try:
            async with httpx.AsyncClient(timeout=self.timeout_seconds) as client:
                response = await client.get(url, params=params, headers={"X-Api-Key": self.api_key})
                response.raise_for_status()
                return response.json()
        except httpx.TimeoutException:
            raise NewsProviderError("NewsAPI request timed out")
        except httpx.HTTPStatusError as e:
            raise NewsProviderError(f"NewsAPI returned HTTP {e.response.status_code}")
        except httpx.RequestError as e:
            raise NewsProviderError(f"NewsAPI request failed: {e}")
        except ValueError as e:
            raise NewsProviderError(f"NewsAPI returned invalid JSON: {e}")

    @staticmethod
    def _map_article(raw: Dict[str, Any]) -> Optional[Article]:
        url = raw.get("url")
        if not url:
            return None

        source = raw.get("source") or {}
        return Article(
            url=url,
            title=raw.get("title") or "",
            source_id=source.get("id"),
            image_url=raw.get("urlToImage"),
            published_at=raw.get("publishedAt"),
        )
