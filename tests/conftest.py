import os
import tempfile

import pytest

# Uploaded logos go to a throwaway directory; set before the app is imported
os.environ.setdefault("UPLOAD_DIR", tempfile.mkdtemp(prefix="kodeshboard-uploads-"))

from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from kodeshboard.db import models
from kodeshboard.db.database import SessionLocal, engine
from kodeshboard.services.daily_data import set_daily_data_provider
from kodeshboard.utils.config import refresh_config_cache


@pytest.fixture(scope="session", autouse=True)
def create_schema_once():
    """Create all tables once per test session (SQLite in-memory lives as long as the process)."""
    models.Base.metadata.create_all(bind=engine)
    yield
    models.Base.metadata.drop_all(bind=engine)


@pytest.fixture(autouse=True)
def clean_data():
    """Truncate all tables between tests without dropping metadata (faster)."""
    connection = engine.connect()
    trans = connection.begin()
    for table in reversed(models.Base.metadata.sorted_tables):
        connection.execute(table.delete())
    trans.commit()
    connection.close()
    yield


@pytest.fixture(autouse=True)
def reset_runtime_state():
    """Fresh config cache and the sample daily data for every test."""
    refresh_config_cache()
    set_daily_data_provider(None)
    yield
    refresh_config_cache()
    set_daily_data_provider(None)


@pytest.fixture
def db_session():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client():
    from kodeshboard.api.main import app

    return TestClient(app)


@pytest.fixture
def prayer_factory(db_session: Session):
    def _create(name: str, **fields):
        row = models.PrayerTime(
            name=name,
            type=fields.pop("type", "prayer"),
            time_type=fields.pop("time_type", "fixed"),
            fixed_time=fields.pop("fixed_time", "08:00"),
            valid_on=fields.pop("valid_on", [{"type": "weekday", "value": d} for d in range(7)]),
            **fields,
        )
        db_session.add(row)
        db_session.commit()
        db_session.refresh(row)
        return row
    return _create
