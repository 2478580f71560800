from .reaction_repository import ReactionRepository
from .cache_repository import CacheRepository

__all__ = ["ReactionRepository", "CacheRepository"]
