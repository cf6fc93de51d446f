"""Schedule rules for prayers and lessons.

Two rules drive how a schedule row is shown:

* relative-time resolution: a row's time is either its fixed clock time or an
  anchor halachic time shifted by ``offset_minutes``;
* validity days: a row applies on the weekdays and special days listed in its
  ``valid_on`` entries (an empty list means every day).

Rows may be ORM objects, pydantic models or plain dicts.
"""

from __future__ import annotations

import re
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

from kodeshboard.utils.catalog import (
    ANCHOR_TIMES,
    DEFAULT_ANCHOR,
    PRAYER_TYPES,
    SPECIAL_DAYS,
    WEEKDAY_KEYS,
    WEEKDAY_NAMES,
)

TIME_TYPE_FIXED = "fixed"
TIME_TYPE_RELATIVE = "relative"
EVENT_TYPE_PRAYER = "prayer"
EVENT_TYPE_LESSON = "lesson"
VALID_ON_WEEKDAY = "weekday"
VALID_ON_SPECIAL = "special"

DEFAULT_FIXED_TIME = "08:00"
MISSING_TIME = "—"
ALL_DAYS_LABEL = "כל הימים"
ALL_WEEKDAYS_LABEL = "כל ימי השבוע"
MINUTES_WORD = "דקות"

_CLOCK_RE = re.compile(r"^([01]?\d|2[0-3]):([0-5]\d)$")
_MINUTES_PER_DAY = 24 * 60


def _field(event: Any, name: str, default: Any = None) -> Any:
    if isinstance(event, Mapping):
        return event.get(name, default)
    return getattr(event, name, default)


def _item_field(item: Any, name: str) -> Any:
    if isinstance(item, Mapping):
        return item.get(name)
    return getattr(item, name, None)


def parse_clock(value: Optional[str]) -> Optional[int]:
    """Return minutes after midnight for an ``HH:MM`` string, or None."""
    if not value:
        return None
    match = _CLOCK_RE.match(value.strip())
    if not match:
        return None
    return int(match.group(1)) * 60 + int(match.group(2))


def format_clock(minutes: int) -> str:
    minutes %= _MINUTES_PER_DAY
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def default_valid_on() -> List[Dict[str, Any]]:
    return [{"type": VALID_ON_WEEKDAY, "value": day} for day in range(7)]


def resolve_event_time(event: Any, daily_times: Mapping[str, str]) -> Optional[str]:
    """Return the clock time an event happens at, or None when unresolved.

    Relative times wrap around midnight.
    """
    if _field(event, "time_type", TIME_TYPE_FIXED) != TIME_TYPE_RELATIVE:
        fixed = _field(event, "fixed_time")
        minutes = parse_clock(fixed)
        return format_clock(minutes) if minutes is not None else None
    anchor_id = _field(event, "anchor_time_id")
    if not anchor_id:
        return None
    anchor = parse_clock(daily_times.get(anchor_id))
    if anchor is None:
        return None
    offset = _field(event, "offset_minutes") or 0
    return format_clock(anchor + int(offset))


def format_event_time(event: Any) -> str:
    """Admin-table description of when an event happens."""
    if _field(event, "time_type", TIME_TYPE_FIXED) != TIME_TYPE_RELATIVE:
        return _field(event, "fixed_time") or MISSING_TIME
    anchor_id = _field(event, "anchor_time_id")
    if not anchor_id:
        return MISSING_TIME
    anchor_name = ANCHOR_TIMES.get(anchor_id, anchor_id)
    offset = int(_field(event, "offset_minutes") or 0)
    if offset == 0:
        return anchor_name
    if offset > 0:
        return f"{anchor_name} + {offset} {MINUTES_WORD}"
    return f"{anchor_name} - {abs(offset)} {MINUTES_WORD}"


def _weekdays(valid_on: Iterable[Any]) -> List[int]:
    days = []
    for item in valid_on:
        if _item_field(item, "type") != VALID_ON_WEEKDAY:
            continue
        value = _item_field(item, "value")
        try:
            day = int(value)
        except (TypeError, ValueError):
            continue
        if day not in days:
            days.append(day)
    return days


def _special_days(valid_on: Iterable[Any]) -> List[str]:
    specials = []
    for item in valid_on:
        if _item_field(item, "type") != VALID_ON_SPECIAL:
            continue
        value = str(_item_field(item, "value"))
        if value not in specials:
            specials.append(value)
    return specials


def applies_on(event: Any, weekday: int, special_day_types: Sequence[str] = ()) -> bool:
    """Validity-day rule: does the event apply on this day?

    ``weekday`` uses Sunday = 0. The event applies when its ``valid_on`` is
    empty, lists the weekday, or lists any of the day's special-day types.
    """
    valid_on = _field(event, "valid_on") or []
    if not valid_on:
        return True
    if weekday in _weekdays(valid_on):
        return True
    return any(special in special_day_types for special in _special_days(valid_on))


def format_valid_days(event: Any) -> str:
    valid_on = _field(event, "valid_on") or []
    if not valid_on:
        return ALL_DAYS_LABEL
    weekdays = _weekdays(valid_on)
    specials = [SPECIAL_DAYS.get(key, key) for key in _special_days(valid_on)]

    parts = []
    if len(weekdays) == 7:
        parts.append(ALL_WEEKDAYS_LABEL)
    elif weekdays:
        parts.append(", ".join(
            WEEKDAY_NAMES[day] if 0 <= day < 7 else str(day) for day in weekdays
        ))
    if specials:
        parts.append(", ".join(specials))
    return ", ".join(parts)


def prayer_type_label(prayer_type: Optional[str]) -> str:
    if not prayer_type:
        return "-"
    return PRAYER_TYPES.get(prayer_type, prayer_type)


def selection_from_valid_on(valid_on: Optional[Iterable[Any]]) -> Dict[str, Dict[str, bool]]:
    """Expand ``valid_on`` into the weekday/special-day switch maps of the event form."""
    days = {key: False for key in WEEKDAY_KEYS}
    specials = {key: False for key in SPECIAL_DAYS}
    for day in _weekdays(valid_on or []):
        if 0 <= day < 7:
            days[WEEKDAY_KEYS[day]] = True
    for special in _special_days(valid_on or []):
        specials[special] = True
    return {"days": days, "special_days": specials}


def valid_on_from_selection(
    days: Mapping[str, bool], special_days: Mapping[str, bool]
) -> List[Dict[str, Any]]:
    """Collapse the event form's switch maps back into ``valid_on`` entries."""
    valid_on: List[Dict[str, Any]] = []
    for index, key in enumerate(WEEKDAY_KEYS):
        if days.get(key):
            valid_on.append({"type": VALID_ON_WEEKDAY, "value": index})
    for key, selected in special_days.items():
        if selected:
            valid_on.append({"type": VALID_ON_SPECIAL, "value": key})
    return valid_on


def new_event_defaults() -> Dict[str, Any]:
    """Form state for a new schedule row."""
    return {
        "name": "",
        "type": EVENT_TYPE_PRAYER,
        "prayer_type": "",
        "time_type": TIME_TYPE_FIXED,
        "fixed_time": DEFAULT_FIXED_TIME,
        "anchor_time_id": DEFAULT_ANCHOR,
        "offset_minutes": 0,
        "valid_on": default_valid_on(),
    }


def sort_key(event: Any, daily_times: Mapping[str, str]) -> tuple:
    """Order rows by resolved time; unresolved rows go last, then by name."""
    resolved = parse_clock(resolve_event_time(event, daily_times))
    return (resolved is None, resolved or 0, _field(event, "name") or "")
