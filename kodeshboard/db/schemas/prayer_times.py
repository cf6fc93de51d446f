import uuid
from datetime import datetime
from typing import Any, Dict, List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from kodeshboard.utils.catalog import ANCHOR_TIMES, PRAYER_TYPES, SPECIAL_DAYS
from kodeshboard.utils.schedule import (
    DEFAULT_FIXED_TIME,
    DEFAULT_ANCHOR,
    default_valid_on,
    format_clock,
    parse_clock,
)

EventType = Literal["prayer", "lesson"]
TimeType = Literal["fixed", "relative"]


class ValidOnItem(BaseModel):
    type: Literal["weekday", "special"]
    value: Union[int, str]

    @model_validator(mode="after")
    def _check_value(self):
        if self.type == "weekday":
            try:
                day = int(self.value)
            except (TypeError, ValueError):
                raise ValueError("weekday value must be an integer 0-6 (Sunday = 0)")
            if not 0 <= day <= 6:
                raise ValueError("weekday value must be an integer 0-6 (Sunday = 0)")
            self.value = day
        elif self.value not in SPECIAL_DAYS:
            raise ValueError(f"Unknown special day '{self.value}'")
        return self


def _check_fixed_time(value: str | None) -> str | None:
    if value is None or value == "":
        return None
    minutes = parse_clock(value)
    if minutes is None:
        raise ValueError("fixed_time must be HH:MM")
    return format_clock(minutes)


def _check_prayer_type(value: str | None) -> str | None:
    if value and value not in PRAYER_TYPES:
        raise ValueError(f"prayer_type must be one of: {', '.join(PRAYER_TYPES)}")
    return value or None


def _check_anchor(value: str | None) -> str | None:
    if value and value not in ANCHOR_TIMES:
        raise ValueError(f"anchor_time_id must be one of: {', '.join(ANCHOR_TIMES)}")
    return value or None


class PrayerTimeBase(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    type: EventType = "prayer"
    prayer_type: str | None = None
    time_type: TimeType = "fixed"
    fixed_time: str | None = DEFAULT_FIXED_TIME
    anchor_time_id: str | None = DEFAULT_ANCHOR
    offset_minutes: int = Field(default=0, ge=-1440, le=1440)
    valid_on: List[ValidOnItem] = Field(default_factory=lambda: [ValidOnItem(**item) for item in default_valid_on()])

    @field_validator("fixed_time")
    @classmethod
    def _fixed_time(cls, value):
        return _check_fixed_time(value)

    @field_validator("prayer_type")
    @classmethod
    def _prayer_type(cls, value):
        return _check_prayer_type(value)

    @field_validator("anchor_time_id")
    @classmethod
    def _anchor(cls, value):
        return _check_anchor(value)

    @model_validator(mode="after")
    def _time_rules(self):
        # Lessons are always scheduled at a fixed clock time
        if self.type == "lesson":
            self.time_type = "fixed"
        if self.time_type == "fixed" and not self.fixed_time:
            raise ValueError("fixed_time is required for fixed-time events")
        if self.time_type == "relative" and not self.anchor_time_id:
            raise ValueError("anchor_time_id is required for relative-time events")
        return self


class PrayerTimeCreate(PrayerTimeBase):
    pass


class PrayerTimeUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    type: EventType | None = None
    prayer_type: str | None = None
    time_type: TimeType | None = None
    fixed_time: str | None = None
    anchor_time_id: str | None = None
    offset_minutes: int | None = Field(default=None, ge=-1440, le=1440)
    valid_on: List[ValidOnItem] | None = None


class PrayerTime(BaseModel):
    id: uuid.UUID
    name: str
    type: EventType
    prayer_type: str | None = None
    time_type: TimeType
    fixed_time: str | None = None
    anchor_time_id: str | None = None
    offset_minutes: int = 0
    valid_on: List[Dict[str, Any]] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)


class ScheduleRow(BaseModel):
    id: uuid.UUID
    name: str
    type: EventType
    prayer_type: str | None = None
    prayer_type_label: str
    time_label: str
    valid_days_label: str


class EventForm(BaseModel):
    """Dialog state for creating or editing a schedule row."""
    name: str
    type: EventType
    prayer_type: str
    time_type: TimeType
    fixed_time: str
    anchor_time_id: str
    offset_minutes: int
    valid_on: List[Dict[str, Any]]
    days: Dict[str, bool]
    special_days: Dict[str, bool]
