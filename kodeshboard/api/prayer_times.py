"""
Prayer and lesson schedule endpoints.

CRUD over the schedule store, the admin schedule table, and the event
dialog's form state.
"""
import logging
import uuid
from typing import List, Literal, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from sqlalchemy.orm import Session

from kodeshboard.db import schemas
from kodeshboard.db.database import get_db
from kodeshboard.db.repositories import prayer_times as prayer_repo
from kodeshboard.utils.schedule import (
    EVENT_TYPE_LESSON,
    EVENT_TYPE_PRAYER,
    format_event_time,
    format_valid_days,
    new_event_defaults,
    prayer_type_label,
    selection_from_valid_on,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["schedule"])

_TAB_TYPES = {"prayers": EVENT_TYPE_PRAYER, "lessons": EVENT_TYPE_LESSON}


def _event_form(data: dict) -> schemas.EventForm:
    selection = selection_from_valid_on(data.get("valid_on"))
    return schemas.EventForm(
        name=data.get("name") or "",
        type=data.get("type") or EVENT_TYPE_PRAYER,
        prayer_type=data.get("prayer_type") or "",
        time_type=data.get("time_type") or "fixed",
        fixed_time=data.get("fixed_time") or "08:00",
        anchor_time_id=data.get("anchor_time_id") or "sunrise_visible",
        offset_minutes=data.get("offset_minutes") or 0,
        valid_on=list(data.get("valid_on") or []),
        days=selection["days"],
        special_days=selection["special_days"],
    )


@router.get("/prayer-times/", response_model=List[schemas.PrayerTime])
def list_prayer_times(
    type: Optional[Literal["prayer", "lesson"]] = None,
    skip: int = 0,
    limit: int = 500,
    db: Session = Depends(get_db),
):
    return prayer_repo.get_prayer_times(db, event_type=type, skip=skip, limit=limit)


@router.post("/prayer-times/", response_model=schemas.PrayerTime, status_code=status.HTTP_201_CREATED)
def create_prayer_time(prayer_time: schemas.PrayerTimeCreate, db: Session = Depends(get_db)):
    created = prayer_repo.create_prayer_time(db, prayer_time)
    logger.info("prayer_time_created: id=%s type=%s name=%s", created.id, created.type, created.name)
    return created


@router.get("/prayer-times/defaults", response_model=schemas.EventForm)
def get_new_event_form():
    """Initial dialog state for adding a schedule row."""
    return _event_form(new_event_defaults())


@router.get("/prayer-times/{prayer_time_id}", response_model=schemas.PrayerTime)
def get_prayer_time(prayer_time_id: uuid.UUID, db: Session = Depends(get_db)):
    db_prayer_time = prayer_repo.get_prayer_time(db, prayer_time_id)
    if not db_prayer_time:
        raise HTTPException(status_code=404, detail="Prayer time not found")
    return db_prayer_time


@router.get("/prayer-times/{prayer_time_id}/form", response_model=schemas.EventForm)
def get_edit_event_form(prayer_time_id: uuid.UUID, db: Session = Depends(get_db)):
    """Dialog state for editing an existing schedule row."""
    db_prayer_time = prayer_repo.get_prayer_time(db, prayer_time_id)
    if not db_prayer_time:
        raise HTTPException(status_code=404, detail="Prayer time not found")
    return _event_form(schemas.PrayerTime.model_validate(db_prayer_time).model_dump())


@router.put("/prayer-times/{prayer_time_id}", response_model=schemas.PrayerTime)
def update_prayer_time(
    prayer_time_id: uuid.UUID,
    prayer_time: schemas.PrayerTimeUpdate,
    db: Session = Depends(get_db),
):
    db_prayer_time = prayer_repo.get_prayer_time(db, prayer_time_id)
    if not db_prayer_time:
        raise HTTPException(status_code=404, detail="Prayer time not found")
    current = schemas.PrayerTime.model_validate(db_prayer_time).model_dump(
        exclude={"id", "created_at", "updated_at"}
    )
    current.update(prayer_time.model_dump(exclude_unset=True))
    # The merged row must satisfy the same rules as a new one
    try:
        merged = schemas.PrayerTimeBase.model_validate(current)
    except ValidationError as e:
        raise RequestValidationError(e.errors(include_url=False, include_context=False))
    updated = prayer_repo.replace_prayer_time(db, prayer_time_id, merged)
    logger.info("prayer_time_updated: id=%s", prayer_time_id)
    return updated


@router.delete("/prayer-times/{prayer_time_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_prayer_time(prayer_time_id: uuid.UUID, db: Session = Depends(get_db)):
    db_prayer_time = prayer_repo.get_prayer_time(db, prayer_time_id)
    if not db_prayer_time:
        raise HTTPException(status_code=404, detail="Prayer time not found")
    event_type = db_prayer_time.type
    prayer_repo.delete_prayer_time(db, prayer_time_id)
    logger.info("prayer_time_deleted: id=%s type=%s", prayer_time_id, event_type)
    return None


@router.get("/schedule", response_model=List[schemas.ScheduleRow])
def get_schedule_table(
    tab: Literal["prayers", "lessons"] = "prayers",
    db: Session = Depends(get_db),
):
    """Rows of the admin schedule table for one tab."""
    events = prayer_repo.get_prayer_times(db, event_type=_TAB_TYPES[tab])
    return [
        schemas.ScheduleRow(
            id=e.id,
            name=e.name,
            type=e.type,
            prayer_type=e.prayer_type,
            prayer_type_label=prayer_type_label(e.prayer_type),
            time_label=format_event_time(e),
            valid_days_label=format_valid_days(e),
        )
        for e in events
    ]
