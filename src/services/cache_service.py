"""
JSON cache backed by the ``cache_entries`` table.

Feed and article responses are cached under string keys with a TTL. A cache
that cannot be read or written is logged and treated as a miss, so a broken
cache slows the gateway down but never fails a request.
"""

import json
from typing import Any, Optional

import structlog
from sqlalchemy.exc import SQLAlchemyError

from ..repositories.cache_repository import CacheRepository

logger = structlog.get_logger(__name__)


class CacheService:

    def __init__(self, repository: CacheRepository, enabled: bool = True):
        self.repository = repository
        self.enabled = enabled

    def get(self, key: str) -> Optional[Any]:
        if not self.enabled:
            return None

        try:
            raw = self.repository.get(key)
        except SQLAlchemyError as e:
            self.repository.session.rollback()
            logger.warning("cache_read_failed", key=key, error=str(e))
            return None

        if raw is None:
            return None

        try:
            return json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("cache_entry_corrupt", key=key)
            return None

    def set(self, key: str, value: Any, ttl_seconds: int) -> bool:
        if not self.enabled:
            return False

        try:
            self.repository.set(key, json.dumps(value), ttl_seconds)
            return True
        except SQLAlchemyError as e:
            self.repository.session.rollback()
            logger.warning("cache_write_failed", key=key, error=str(e))
            return False

    def purge_expired(self) -> int:
        deleted = self.repository.delete_expired()
        if deleted:
            logger.info("cache_expired_entries_purged", deleted=deleted)
        return deleted
