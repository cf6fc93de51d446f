import uuid
from sqlalchemy import Column, String, Integer, DateTime, Index, Uuid
from .base import Base, JsonDocument, now_utc


class PrayerTime(Base):
    """A prayer or lesson on the synagogue schedule."""
    __tablename__ = 'prayer_times'
    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(255), nullable=False)
    type = Column(String(20), nullable=False, default='prayer')
    prayer_type = Column(String(20), nullable=True)
    time_type = Column(String(20), nullable=False, default='fixed')
    fixed_time = Column(String(5), nullable=True, default='08:00')
    anchor_time_id = Column(String(50), nullable=True, default='sunrise_visible')
    offset_minutes = Column(Integer, nullable=False, default=0)
    # [{"type": "weekday", "value": 0..6} | {"type": "special", "value": "<key>"}]
    valid_on = Column(JsonDocument, nullable=False, default=list)
    created_at = Column(DateTime(timezone=True), default=now_utc)
    updated_at = Column(DateTime(timezone=True), default=now_utc, onupdate=now_utc)

    __table_args__ = (
        Index('idx_prayer_times_type', 'type'),
    )
