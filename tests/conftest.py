import pytest
from unittest.mock import MagicMock, AsyncMock
import httpx

from src.feed import SourceCatalog, Source, Side, Article


@pytest.fixture
def mock_settings():
    settings = MagicMock()
    settings.newsapi_key = "test-newsapi-key"
    settings.newsapi_base_url = "https://newsapi.test/v2"
    settings.newsapi_page_size = 50
    settings.http_timeout_seconds = 5.0
    settings.feed_slot_count = 4
    settings.feed_balance_sides = True
    settings.cache_enabled = True
    settings.feed_cache_ttl_seconds = 1800
    settings.article_cache_ttl_seconds = 86400
    return settings


@pytest.fixture
def two_source_catalog():
    return SourceCatalog([
        Source(id="A", name="Alpha", side=Side.LEFT, x=0.0, y=0.0),
        Source(id="B", name="Bravo", side=Side.RIGHT, x=10.0, y=10.0),
    ])


@pytest.fixture
def sample_catalog():
    return SourceCatalog([
        Source(id="cnn", name="CNN", side=Side.LEFT, x=-0.5, y=0.2),
        Source(id="msnbc", name="MSNBC", side=Side.LEFT, x=-0.7, y=0.1),
        Source(id="the-huffington-post", name="The Huffington Post", side=Side.LEFT, x=-0.8, y=-0.3),
        Source(id="reuters", name="Reuters", side=Side.CENTER, x=0.0, y=0.1),
        Source(id="associated-press", name="Associated Press", side=Side.CENTER, x=-0.1, y=0.0),
        Source(id="fox-news", name="Fox News", side=Side.RIGHT, x=0.7, y=0.4),
        Source(id="national-review", name="National Review", side=Side.RIGHT, x=0.6, y=0.2),
    ])


@pytest.fixture
def sample_articles():
    return [
        Article(
            url="https://www.reuters.com/world/story-1",
            title="Reuters story",
            source_id="reuters",
            image_url="https://www.reuters.com/img/1.jpg",
            published_at="2026-10-18T09:00:00Z",
        ),
        Article(
            url="https://www.cnn.com/2026/10/18/politics/story-2",
            title="CNN story",
            source_id="cnn",
            image_url="https://cdn.cnn.com/img/2.jpg",
            published_at="2026-10-18T10:00:00Z",
        ),
    ]


@pytest.fixture
def newsapi_payload():
    return {
        "status": "ok",
        "totalResults": 2,
        "articles": [
            {
                "source": {"id": "reuters", "name": "Reuters"},
                "author": "Reuters Staff",
                "title": "Reuters story",
                "url": "https://www.reuters.com/world/story-1",
                "urlToImage": "https://www.reuters.com/img/1.jpg",
                "publishedAt": "2026-10-18T09:00:00Z",
            },
            {
                "source": {"id": "cnn", "name": "CNN"},
                "author": None,
                "title": "CNN story",
                "url": "https://www.cnn.com/2026/10/18/politics/story-2",
                "urlToImage": None,
                "publishedAt": "2026-10-18T10:00:00Z",
            },
        ],
    }


@pytest.fixture
def sample_article_html():
    paragraphs = "".join(
        f"<p>Paragraph {i} of the story carries enough words to look like real reporting on the day.</p>"
        for i in range(20)
    )
    return (
        "<html><head><title>Budget vote delayed</title>"
        '<meta property="og:title" content="Budget vote delayed" />'
        '<meta name="author" content="Jane Reporter" />'
        '<meta property="article:published_time" content="2026-10-18T09:00:00+00:00" />'
        "</head><body><article><h1>Budget vote delayed</h1>"
        f"{paragraphs}</article></body></html>"
    )


@pytest.fixture
def mock_httpx_response():
    response = MagicMock(spec=httpx.Response)
    response.text = "<html><body><p>Test content</p></body></html>"
    response.headers = {}
    response.raise_for_status = MagicMock()
    return response


@pytest.fixture
def mock_news_client(sample_articles):
    client = MagicMock()
    client.get_articles_by_sources = AsyncMock(return_value=sample_articles)
    return client


@pytest.fixture
def mock_cache_service():
    cache = MagicMock()
    cache.get = MagicMock(return_value=None)
    cache.set = MagicMock(return_value=True)
    return cache


@pytest.fixture
def test_db():
    from sqlalchemy import create_engine
    from sqlalchemy.orm import sessionmaker
    from sqlalchemy.pool import StaticPool
    from src.core.database import Base
    from src.models import Reaction, CacheEntry  # noqa: F401

    # Use in-memory SQLite for tests
    SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"
    engine = create_engine(
        SQLALCHEMY_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    Base.metadata.create_all(bind=engine)

    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
async def async_client(test_db, sample_catalog, mock_news_client):
    from httpx import AsyncClient, ASGITransport
    from src.main import app
    from src.core.database import get_db
    from src.api.dependencies import get_source_catalog, get_news_api_client

    def override_get_db():
        try:
            yield test_db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_source_catalog] = lambda: sample_catalog
    app.dependency_overrides[get_news_api_client] = lambda: mock_news_client

    # Use ASGITransport for direct app interaction
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()
