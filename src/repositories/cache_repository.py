from datetime import datetime, timedelta
from typing import Optional

from sqlalchemy.orm import Session

from ..models.cache_entry import CacheEntry
from ..utils.date_utils import utc_now


class CacheRepository:

    def __init__(self, session: Session):
        self.session = session

    def get(self, key: str, now: Optional[datetime] = None) -> Optional[str]:
        entry = self.session.get(CacheEntry, key)
        if not entry:
            return None

        if entry.expires_at <= (now or utc_now()):
            self.session.delete(entry)
            self.session.commit()
            return None

        return entry.value

    def set(self, key: str, value: str, ttl_seconds: int) -> CacheEntry:
        expires_at = utc_now() + timedelta(seconds=ttl_seconds)

        entry = self.session.get(CacheEntry, key)
        if entry:
            entry.value = value
            entry.expires_at = expires_at
        else:
            entry = CacheEntry(key=key, value=value, expires_at=expires_at)
            self.session.add(entry)

        self.session.commit()
        return entry

    def delete_expired(self) -> int:
        deleted = (
            self.session.query(CacheEntry)
            .filter(CacheEntry.expires_at <= utc_now())
            .delete(synchronize_session=False)
        )
        self.session.commit()
        return deleted
