from .reaction import Reaction
from .cache_entry import CacheEntry

__all__ = ["Reaction", "CacheEntry"]
