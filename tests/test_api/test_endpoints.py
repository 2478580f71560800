import pytest
from unittest.mock import MagicMock, AsyncMock

from src.exceptions import NewsProviderError
from src.models import Reaction
from src.parsers.base_parser import ArticleParseResult


@pytest.fixture
def mock_article_parser():
    from src.main import app
    from src.api.dependencies import get_article_parser

    parser = MagicMock()
    parser.parse = AsyncMock(return_value=ArticleParseResult(
        "https://news.example.com/budget",
        title="Budget vote delayed",
        author="Jane Reporter",
        published_at="2026-10-18T09:00:00+00:00",
        html_content="<div><p>Body</p></div>",
        reading_time_sec=96,
    ))
    app.dependency_overrides[get_article_parser] = lambda: parser
    return parser


class TestFeedEndpoint:
    @pytest.mark.asyncio
    async def test_feed(self, async_client, mock_news_client):
        response = await async_client.get("/feed", params={"x": "0", "y": "0"})

        assert response.status_code == 200
        cards = response.json()
        assert [card["sourceId"] for card in cards] == [
            "associated-press", "reuters", "cnn", "national-review"
        ]
        assert cards[1] == {
            "articleId": "https://www.reuters.com/world/story-1",
            "title": "Reuters story",
            "sourceId": "reuters",
            "sourceName": "Reuters",
            "imageUrl": "https://www.reuters.com/img/1.jpg",
            "url": "https://www.reuters.com/world/story-1",
            "publishedAt": "2026-10-18T09:00:00Z",
            "side": "center",
        }
        mock_news_client.get_articles_by_sources.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_feed_served_from_cache_on_repeat(self, async_client, mock_news_client):
        first = await async_client.get("/feed", params={"x": "0.0001", "y": "0"})
        second = await async_client.get("/api/v1/feed", params={"x": "0", "y": "0.0002"})

        assert second.status_code == 200
        assert second.json() == first.json()
        mock_news_client.get_articles_by_sources.assert_awaited_once()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("params", [
        {},
        {"x": "0"},
        {"x": "abc", "y": "0"},
        {"x": "nan", "y": "0"},
        {"x": "0", "y": "inf"},
    ])
    async def test_feed_rejects_bad_coordinates(self, async_client, mock_news_client, params):
        response = await async_client.get("/feed", params=params)

        assert response.status_code == 400
        assert response.json() == {"error": "x and y required"}
        mock_news_client.get_articles_by_sources.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_feed_provider_failure(self, async_client, mock_news_client):
        mock_news_client.get_articles_by_sources = AsyncMock(side_effect=NewsProviderError("NewsAPI returned HTTP 429"))

        response = await async_client.get("/feed", params={"x": "0.5", "y": "0.5"})

        assert response.status_code == 500
        assert response.json() == {
            "error": "Failed to fetch articles",
            "details": "NewsAPI returned HTTP 429",
        }


class TestArticleEndpoint:
    @pytest.mark.asyncio
    async def test_article(self, async_client, mock_article_parser):
        response = await async_client.get("/article", params={"url": "https://news.example.com/budget"})

        assert response.status_code == 200
        assert response.json() == {
            "title": "Budget vote delayed",
            "author": "Jane Reporter",
            "publishedAt": "2026-10-18T09:00:00+00:00",
            "htmlContent": "<div><p>Body</p></div>",
            "readingTimeSec": 96,
        }

        cached = await async_client.get("/article", params={"url": "https://news.example.com/budget"})
        assert cached.json() == response.json()
        mock_article_parser.parse.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_article_requires_url(self, async_client, mock_article_parser):
        response = await async_client.get("/article")

        assert response.status_code == 400
        assert response.json() == {"error": "url required"}

    @pytest.mark.asyncio
    async def test_article_invalid_url(self, async_client, mock_article_parser):
        response = await async_client.get("/article", params={"url": "ftp://files.example"})

        assert response.status_code == 400
        assert "Invalid URL" in response.json()["error"]
        mock_article_parser.parse.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_article_parse_failure(self, async_client, mock_article_parser):
        mock_article_parser.parse = AsyncMock(return_value=ArticleParseResult(
            "https://news.example.com/gone", error="URL unreachable: HTTP 404"
        ))

        response = await async_client.get("/article", params={"url": "https://news.example.com/gone"})

        assert response.status_code == 500
        assert response.json() == {
            "error": "Failed to parse article",
            "details": "URL unreachable: HTTP 404",
        }


class TestReactionEndpoint:
    @pytest.mark.asyncio
    async def test_reaction(self, async_client, test_db):
        response = await async_client.post("/reaction", json={
            "userId": "user-1",
            "articleId": "https://www.reuters.com/world/story-1",
            "emoji": "🤔",
            "ts": 1760000000000,
        })

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}
        stored = test_db.query(Reaction).one()
        assert stored.user_id == "user-1"
        assert stored.emoji == "🤔"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("payload", [
        {"articleId": "a", "emoji": "👍"},
        {"userId": "u", "emoji": "👍"},
        {"userId": "u", "articleId": "a", "emoji": ""},
    ])
    async def test_reaction_requires_fields(self, async_client, test_db, payload):
        response = await async_client.post("/reaction", json=payload)

        assert response.status_code == 400
        assert response.json() == {"error": "userId, articleId, and emoji required"}
        assert test_db.query(Reaction).count() == 0

    @pytest.mark.asyncio
    async def test_reaction_without_body(self, async_client, test_db):
        response = await async_client.post("/reaction")

        assert response.status_code == 400
        assert response.json() == {"error": "userId, articleId, and emoji required"}
        assert test_db.query(Reaction).count() == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize("payload", [
        [],
        {"userId": None, "articleId": "a", "emoji": "👍"},
        {"userId": ["u"], "articleId": "a", "emoji": "👍"},
    ])
    async def test_reaction_wrong_shape(self, async_client, test_db, payload):
        response = await async_client.post("/reaction", json=payload)

        assert response.status_code == 400
        assert response.json() == {"error": "userId, articleId, and emoji required"}
        assert test_db.query(Reaction).count() == 0

    @pytest.mark.asyncio
    async def test_reaction_numeric_user_id(self, async_client, test_db):
        response = await async_client.post("/reaction", json={"userId": 42, "articleId": "a", "emoji": "👍"})

        assert response.status_code == 200
        assert test_db.query(Reaction).one().user_id == "42"

    @pytest.mark.asyncio
    async def test_reaction_out_of_range_timestamp(self, async_client, test_db):
        response = await async_client.post("/reaction", json={
            "userId": "u", "articleId": "a", "emoji": "👍", "ts": 10**17,
        })

        assert response.status_code == 400
        assert "Invalid reaction timestamp" in response.json()["error"]
        assert test_db.query(Reaction).count() == 0

    @pytest.mark.asyncio
    async def test_reaction_non_numeric_timestamp(self, async_client, test_db):
        response = await async_client.post("/reaction", json={
            "userId": "u", "articleId": "a", "emoji": "👍", "ts": "yesterday",
        })

        assert response.status_code == 400
        assert response.json() == {"error": "ts must be epoch milliseconds"}

    @pytest.mark.asyncio
    async def test_reaction_malformed_json(self, async_client, test_db):
        response = await async_client.post(
            "/reaction",
            content=b'{"userId": "u",',
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert "error" in response.json()
        assert "detail" not in response.json()
        assert test_db.query(Reaction).count() == 0


class TestHealthEndpoint:
    @pytest.mark.asyncio
    async def test_health(self, async_client):
        response = await async_client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ok"
        assert body["database"] == "healthy"
        assert "newsApiKeyPresent" in body
        assert "timestamp" in body
