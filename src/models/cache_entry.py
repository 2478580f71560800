from sqlalchemy import Column, String, Text, DateTime
from sqlalchemy.sql import func

from ..core.database import Base


class CacheEntry(Base):
    __tablename__ = "cache_entries"

    key = Column(String(2048), primary_key=True)
    value = Column(Text, nullable=False)
    expires_at = Column(DateTime, nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
