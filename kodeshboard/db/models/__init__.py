"""
SQLAlchemy models for the board's three entity stores.

Exposes `Base`, `now_utc`, and all ORM classes from one import point.
"""

from .base import Base, JsonDocument, now_utc  # re-export

from .settings import Setting
from .display_config import DisplayConfig
from .prayer_times import PrayerTime

__all__ = [
    "Base",
    "JsonDocument",
    "now_utc",
    "Setting",
    "DisplayConfig",
    "PrayerTime",
]
