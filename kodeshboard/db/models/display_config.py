import uuid
from sqlalchemy import Column, String, DateTime, UniqueConstraint, Uuid
from .base import Base, JsonDocument, now_utc


class DisplayConfig(Base):
    __tablename__ = 'display_configs'
    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    template_id = Column(String(50), nullable=False)
    zone_id = Column(String(50), nullable=False)
    display_type = Column(String(30), nullable=False, default='custom_text')
    config = Column(JsonDocument, nullable=False, default=dict)
    zone_background_color = Column(String(9), nullable=False, default='#FFFFFF')
    created_at = Column(DateTime(timezone=True), default=now_utc)
    updated_at = Column(DateTime(timezone=True), default=now_utc, onupdate=now_utc)

    __table_args__ = (
        UniqueConstraint('template_id', 'zone_id', name='uq_display_configs_template_zone'),
    )
