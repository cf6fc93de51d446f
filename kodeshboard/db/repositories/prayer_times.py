"""
Prayer/lesson schedule repository functions.
"""
from __future__ import annotations

import uuid
from typing import Optional
from sqlalchemy.orm import Session

from kodeshboard.db import models, schemas


def _valid_on_payload(items):
    return [item.model_dump() if hasattr(item, 'model_dump') else dict(item) for item in items]


def create_prayer_time(db: Session, prayer_time: schemas.PrayerTimeCreate):
    data = prayer_time.model_dump(exclude={'valid_on'})
    db_prayer_time = models.PrayerTime(
        **data,
        valid_on=_valid_on_payload(prayer_time.valid_on),
    )
    db.add(db_prayer_time)
    db.commit()
    db.refresh(db_prayer_time)
    return db_prayer_time


def get_prayer_time(db: Session, prayer_time_id: uuid.UUID):
    return db.query(models.PrayerTime).filter(models.PrayerTime.id == prayer_time_id).first()


def get_prayer_times(
    db: Session,
    event_type: Optional[str] = None,
    skip: int = 0,
    limit: int = 500,
):
    q = db.query(models.PrayerTime)
    if event_type is not None:
        q = q.filter(models.PrayerTime.type == event_type)
    return q.order_by(models.PrayerTime.created_at, models.PrayerTime.name).offset(skip).limit(limit).all()


def replace_prayer_time(db: Session, prayer_time_id: uuid.UUID, prayer_time: schemas.PrayerTimeBase):
    """Overwrite every editable field; callers validate the merged row first."""
    db_prayer_time = db.query(models.PrayerTime).filter(models.PrayerTime.id == prayer_time_id).first()
    if db_prayer_time:
        for key, value in prayer_time.model_dump(exclude={'valid_on'}).items():
            setattr(db_prayer_time, key, value)
        db_prayer_time.valid_on = _valid_on_payload(prayer_time.valid_on)
        db.commit()
        db.refresh(db_prayer_time)
    return db_prayer_time


def delete_prayer_time(db: Session, prayer_time_id: uuid.UUID):
    """Delete a schedule row with proper error handling."""
    if prayer_time_id is None:
        return None
    try:
        db_prayer_time = db.query(models.PrayerTime).filter(models.PrayerTime.id == prayer_time_id).first()
        if db_prayer_time:
            db.delete(db_prayer_time)
            db.commit()
        return db_prayer_time
    except Exception as e:
        db.rollback()
        raise RuntimeError(f"Failed to delete prayer time {prayer_time_id}: {str(e)}")
