import logging
import structlog
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.v1 import api_router
from .api.dependencies import get_source_catalog
from .config import get_settings
from .core.database import SessionLocal, create_tables
from .repositories.cache_repository import CacheRepository
from .services.cache_service import CacheService


def apply_logging_preferences(settings):
    logging.getLogger("uvicorn.access").setLevel(logging.INFO if settings.debug else logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(message)s"
)

apply_logging_preferences(settings)

structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer() if settings.log_format == "json" else structlog.dev.ConsoleRenderer(),
    ],
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    wrapper_class=structlog.stdlib.BoundLogger,
    cache_logger_on_first_use=True,
)

logger = structlog.get_logger(__name__)


def purge_expired_cache():
    db = SessionLocal()
    try:
        CacheService(CacheRepository(db)).purge_expired()
    finally:
        db.close()


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    apply_logging_preferences(settings)
    logger.info(
        "Starting Balanced News API",
        version="0.1.0",
        news_api_key_present=bool(settings.newsapi_key),
    )
    try:
        create_tables()
        logger.info("Database tables created/verified")
        purge_expired_cache()
    except Exception as e:
        logger.error("Failed to initialize database", error=str(e))
        raise

    # Fail fast on a broken catalog instead of on the first feed request
    get_source_catalog()

    yield

    logger.info("Shutting down Balanced News API")


def create_application() -> FastAPI:
    app = FastAPI(
        title="Balanced News",
        description="News gateway that assembles a viewpoint-balanced feed for a reader's bias coordinate",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/api/v1/openapi.json",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        logger.debug("request_received", method=request.method, path=request.url.path, query=str(request.query_params))
        return await call_next(request)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        # Error bodies are flat objects ({"error": ...}) for the mobile client
        content = exc.detail if isinstance(exc.detail, dict) else {"detail": exc.detail}
        return JSONResponse(status_code=exc.status_code, content=content, headers=getattr(exc, "headers", None))

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=400,
            content={"error": "Invalid request", "details": jsonable_encoder(exc.errors())},
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request, exc):
        logger.error(
            "Unhandled exception occurred",
            path=request.url.path,
            method=request.method,
            error=str(exc),
            exc_info=exc,
        )
        return JSONResponse(
            status_code=500,
            content={
                "error": "Internal server error",
                "details": "An unexpected error occurred. Please try again later.",
            }
        )

    # Paths used by the mobile client
    app.include_router(api_router, include_in_schema=False)

    # Include API router
    app.include_router(api_router, prefix="/api/v1")

    return app


app = create_application()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "src.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
        log_level="info",
        access_log=settings.debug,
    )
