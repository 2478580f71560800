import asyncio
import time
from typing import Optional

import httpx
import structlog
from newspaper import Article as NewspaperArticle, Config as NewspaperConfig

from .base_parser import BaseArticleParser, ArticleParseResult
from ..exceptions import NetworkError, ValidationError, ParsingError
from ..utils.url_utils import validate_url, supports_web_url
from ..utils.string_utils import count_words, reading_time_seconds


logger = structlog.get_logger(__name__)

USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0 Safari/537.36"
)


class ArticleHtmlFetcher:
    TIMEOUT_SECONDS = 30

    def __init__(self, timeout_seconds: Optional[float] = None):
        self.timeout_seconds = timeout_seconds or self.TIMEOUT_SECONDS

    async def fetch_html(self, url: str) -> str:
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout_seconds,
                follow_redirects=True,
                headers={"User-Agent": USER_AGENT},
            ) as client:
                response = await client.get(url)
                response.raise_for_status()
                return response.text
        except httpx.TimeoutException:
            raise NetworkError("URL unreachable: Request timed out")
        except httpx.HTTPStatusError as e:
            raise NetworkError(f"URL unreachable: HTTP {e.response.status_code}")
        except httpx.RequestError as e:
            raise NetworkError(f"URL unreachable: {e}")


class ArticleHtmlProcessor:
    """Runs newspaper3k extraction over already downloaded HTML"""

    def __init__(self):
        self.config = NewspaperConfig()
        self.config.browser_user_agent = USER_AGENT
        self.config.keep_article_html = True
        self.config.fetch_images = False
        self.config.memoize_articles = False

    def process(self, url: str, html: str) -> ArticleParseResult:
        if not html or not html.strip():
            raise ParsingError("Failed to parse article: empty document")

        try:
            article = NewspaperArticle(url, config=self.config)
            article.download(input_html=html)
            article.parse()
        except Exception as e:
            raise ParsingError(f"Failed to parse article: {e}") from e

        word_count = count_words(article.text)
        published_at = article.publish_date.isoformat() if article.publish_date else ""

        return ArticleParseResult(
            url=url,
            title=article.title,
            author=", ".join(article.authors),
            published_at=published_at,
            html_content=article.article_html or "",
            reading_time_sec=reading_time_seconds(word_count),
        )


class ArticleParser(BaseArticleParser):
    def __init__(self, timeout_seconds: Optional[float] = None):
        self.fetcher = ArticleHtmlFetcher(timeout_seconds)
        self.processor = ArticleHtmlProcessor()

    async def parse(self, source: str, **kwargs) -> ArticleParseResult:
        start_time = time.time()

        try:
            validate_url(source)
            logger.info("article_parse_started", url=source)

            html = await self.fetcher.fetch_html(source)
            result = await asyncio.to_thread(self.processor.process, source, html)

            processing_time = time.time() - start_time
            logger.info(
                "article_parse_completed",
                url=source,
                reading_time_sec=result.reading_time_sec,
                processing_time=round(processing_time, 2)
            )
            return result

        except (ValidationError, NetworkError, ParsingError) as e:
            logger.error("article_parse_failed", error=str(e), url=source)
            return ArticleParseResult(source, error=str(e))

    def supports_source(self, source: str) -> bool:
        return supports_web_url(source)
