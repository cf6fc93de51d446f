import uuid
from sqlalchemy import Column, String, DateTime, Uuid
from .base import Base, JsonDocument, now_utc


class Setting(Base):
    __tablename__ = 'settings'
    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    key = Column(String(100), nullable=False, unique=True, index=True)
    value = Column(JsonDocument, nullable=False, default=dict)
    created_at = Column(DateTime(timezone=True), default=now_utc)
    updated_at = Column(DateTime(timezone=True), default=now_utc, onupdate=now_utc)
