"""
Board view assembly.

Reads the three stores plus the day's data and produces the `BoardView` the
kiosk screen renders. Nothing here writes to the database.
"""
from __future__ import annotations

import logging
from datetime import datetime
from typing import Dict, List, Optional

from sqlalchemy.orm import Session

from kodeshboard.db import models, schemas
from kodeshboard.db.repositories import display_configs as display_repo
from kodeshboard.db.repositories import prayer_times as prayer_repo
from kodeshboard.db.repositories import settings as settings_repo
from kodeshboard.db.repositories.settings import text_value
from kodeshboard.services import settings_service
from kodeshboard.services.daily_data import DailyData, board_now, get_daily_data
from kodeshboard.utils.catalog import (
    DAILY_STUDY,
    DAILY_TIMES,
    WEEKDAY_NAMES,
    board_labels,
    selected_keys,
)
from kodeshboard.utils.config import get_config
from kodeshboard.utils.layouts import DEFAULT_BACKGROUND, DISPLAY_TYPES, resolve_template
from kodeshboard.utils.schedule import (
    EVENT_TYPE_LESSON,
    EVENT_TYPE_PRAYER,
    MISSING_TIME,
    applies_on,
    format_event_time,
    resolve_event_time,
    sort_key,
)

logger = logging.getLogger(__name__)

DEFAULT_BOARD_NAME = "בית הכנסת"
DEFAULT_MARQUEE = "ברוכים הבאים לבית הכנסת"
CUSTOM_TEXT_TITLE = "טקסט חופשי"


def daily_time_rows(selection: Dict[str, bool], day: DailyData) -> List[schemas.BoardRow]:
    labels = board_labels(DAILY_TIMES)
    return [
        schemas.BoardRow(key=key, label=labels.get(key, key), value=day.times.get(key) or MISSING_TIME)
        for key in selected_keys(DAILY_TIMES, selection)
    ]


def daily_study_rows(selection: Dict[str, bool], day: DailyData) -> List[schemas.BoardRow]:
    labels = board_labels(DAILY_STUDY)
    return [
        schemas.BoardRow(key=key, label=labels.get(key, key), value=day.study.get(key) or MISSING_TIME)
        for key in selected_keys(DAILY_STUDY, selection)
    ]


def build_zone_block(
    zone_id: str,
    zone_name: str,
    config: Optional[models.DisplayConfig],
    constant_info: schemas.ConstantInfo,
    day: DailyData,
) -> schemas.ZoneBlock:
    if config is None:
        return schemas.ZoneBlock(zone_id=zone_id, zone_name=zone_name, configured=False)

    block = schemas.ZoneBlock(
        zone_id=zone_id,
        zone_name=zone_name,
        configured=True,
        display_type=config.display_type,
        background_color=config.zone_background_color or DEFAULT_BACKGROUND,
    )
    if config.display_type == "daily_times":
        block.title = DISPLAY_TYPES["daily_times"]
        block.rows = daily_time_rows(constant_info.daily_times, day)
    elif config.display_type == "daily_study":
        block.title = DISPLAY_TYPES["daily_study"]
        block.rows = daily_study_rows(constant_info.daily_study, day)
    elif config.display_type == "custom_text":
        data = config.config or {}
        block.title = text_value(data, "title", CUSTOM_TEXT_TITLE)
        block.content = text_value(data, "content")
    return block


def todays_events(
    events: List[models.PrayerTime],
    day: DailyData,
    event_type: str,
    show_all: bool = False,
) -> List[schemas.BoardEvent]:
    """Events of one type that apply today, ordered by resolved time."""
    selected = [
        e for e in events
        if e.type == event_type and (show_all or applies_on(e, day.weekday, day.special_day_types))
    ]
    selected.sort(key=lambda e: sort_key(e, day.times))
    return [
        schemas.BoardEvent(
            id=e.id,
            name=e.name,
            type=e.type,
            time=resolve_event_time(e, day.times) or MISSING_TIME,
            description=format_event_time(e),
        )
        for e in selected
    ]


def build_board(db: Session, now: Optional[datetime] = None, day: Optional[DailyData] = None) -> schemas.BoardView:
    config = get_config()
    now = now or board_now()
    day = day or get_daily_data(now.date())

    settings = settings_repo.get_settings_map(db)
    template = resolve_template(settings_service.get_active_template_id(db))
    constant_info = settings_service.load_constant_info(db)
    zone_configs = display_repo.get_configs_by_zone(db, template.id)
    events = prayer_repo.get_prayer_times(db)

    header = schemas.BoardHeader(
        synagogue_name=text_value(settings.get(settings_service.SYNAGOGUE_NAME_KEY), "text", DEFAULT_BOARD_NAME),
        logo_url=text_value(settings.get(settings_service.LOGO_KEY), "url"),
        current_time=now.strftime("%H:%M:%S"),
        weekday_name=WEEKDAY_NAMES[day.weekday],
        parsha=day.parsha,
        hebrew_date=day.hebrew_date,
    )
    zones = [
        build_zone_block(zone.id, zone.name, zone_configs.get(zone.id), constant_info, day)
        for zone in template.zones
    ]
    board = schemas.BoardView(
        header=header,
        template_id=template.id,
        zones=zones,
        prayers=todays_events(events, day, EVENT_TYPE_PRAYER, config.show_all_events),
        lessons=todays_events(events, day, EVENT_TYPE_LESSON, config.show_all_events),
        marquee_text=text_value(settings.get(settings_service.MARQUEE_KEY), "text", DEFAULT_MARQUEE),
        refresh_seconds=config.display_refresh_seconds,
    )
    logger.debug(
        "board_built: template=%s zones=%d prayers=%d lessons=%d",
        template.id, len(zones), len(board.prayers), len(board.lessons),
    )
    return board
