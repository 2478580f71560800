from abc import ABC, abstractmethod
from typing import Dict, Any, Optional


class ArticleParseResult:
    def __init__(
        self,
        url: str,
        title: Optional[str] = None,
        author: str = "",
        published_at: str = "",
        html_content: str = "",
        reading_time_sec: int = 0,
        error: Optional[str] = None
    ):
        self.url = url
        self.title = title or url
        self.author = author
        self.published_at = published_at
        self.html_content = html_content
        self.reading_time_sec = reading_time_sec
        self.error = error
        self.success = error is None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "author": self.author,
            "publishedAt": self.published_at,
            "htmlContent": self.html_content,
            "readingTimeSec": self.reading_time_sec,
        }

    def __repr__(self):
        status = "Success" if self.success else f"Error: {self.error}"
        return f"ArticleParseResult({status}, content_length={len(self.html_content)})"


class BaseArticleParser(ABC):

    @abstractmethod
    async def parse(self, source: str, **kwargs) -> ArticleParseResult:
        pass

    @abstractmethod
    def supports_source(self, source: str) -> bool:
        pass
