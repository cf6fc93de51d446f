"""
Shared SQLAlchemy base and helpers.
"""
from datetime import datetime, UTC

from sqlalchemy import JSON
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import declarative_base


def now_utc():
    """Return an aware UTC datetime for default/updated timestamps."""
    return datetime.now(UTC)


# JSONB on PostgreSQL, JSON stored as text elsewhere (SQLite in tests and small installs)
JsonDocument = JSON().with_variant(JSONB(), "postgresql")

Base = declarative_base()
