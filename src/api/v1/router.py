from fastapi import APIRouter

from .endpoints import feed, article, reaction, health

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(feed.router, tags=["feed"])
api_router.include_router(article.router, tags=["article"])
api_router.include_router(reaction.router, tags=["reaction"])
