"""
Daily data provider.

The board needs a day context: the weekday, Hebrew date, parsha, special-day
types, the day's halachic times and the daily study portions. Calculating
these is out of scope for this service, so the default provider returns a
fixed sample day. Deployments that have a real source install their own
provider with `set_daily_data_provider`.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Callable, Dict, Optional, Tuple
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from kodeshboard.utils.config import get_config

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DailyData:
    date: date
    weekday: int  # Sunday = 0
    hebrew_date: str
    hebrew_day: str
    hebrew_month: str
    parsha: str
    special_day_types: Tuple[str, ...] = ()
    times: Dict[str, str] = field(default_factory=dict)
    study: Dict[str, str] = field(default_factory=dict)

    @property
    def is_special_day(self) -> bool:
        return bool(self.special_day_types)


SAMPLE_TIMES: Dict[str, str] = {
    "alos_hashachar": "05:12",
    "mi_sheyakir": "05:45",
    "tzitzit_tefillin": "06:00",
    "sunrise_plain": "06:40",
    "sunrise_visible": "06:45",
    "shema_mga": "08:30",
    "shema_gra": "09:15",
    "tefila_mga": "09:45",
    "tefila_gra": "10:20",
    "chatzot_day": "12:00",
    "mincha_gedola": "12:30",
    "mincha_ketana": "15:30",
    "plag_hamincha": "16:15",
    "sunset_plain": "17:00",
    "sunset_visible": "17:05",
    "tzeit": "17:42",
    "tzeit_r_tam": "18:12",
    "chatzot_night": "00:00",
    "candle_lighting": "16:45",
    "shabbat_exit": "17:50",
}

SAMPLE_STUDY: Dict[str, str] = {
    "daf_yomi": "בבא מציעא דף ק״ב",
    "daf_yomi_yerushalmi": "פאה דף י״ב",
    "halacha_yomit": "אורח חיים סימן קל״ט",
    "amud_yomi_dirshu": "ברכות דף ז:",
    "rambam_yomi": "הלכות שבת פרק ט׳",
    "mishna_yomit": "כלים פרק ג׳ משניות ד׳-ה׳",
    "halacha_daily": "משנה ברורה סימן נ״ה",
}


def board_timezone() -> ZoneInfo:
    name = get_config().board_timezone
    try:
        return ZoneInfo(name)
    except ZoneInfoNotFoundError:
        logger.warning("board_timezone_unknown: tz=%s falling back to UTC", name)
        return ZoneInfo("UTC")


def board_now() -> datetime:
    """Current wall-clock time in the board's timezone."""
    return datetime.now(board_timezone())


def sunday_based_weekday(day: date) -> int:
    """Convert Python's Monday = 0 weekday into the stored Sunday = 0 form."""
    return (day.weekday() + 1) % 7


def sample_daily_data(day: date) -> DailyData:
    return DailyData(
        date=day,
        weekday=sunday_based_weekday(day),
        hebrew_date="ט״ז בחשון תשפ״ה",
        hebrew_day="ט״ז",
        hebrew_month="חשון",
        parsha="לך לך",
        times=dict(SAMPLE_TIMES),
        study=dict(SAMPLE_STUDY),
    )


DailyDataProvider = Callable[[date], DailyData]

_provider: DailyDataProvider = sample_daily_data


def set_daily_data_provider(provider: Optional[DailyDataProvider]) -> None:
    """Install a provider; ``None`` restores the sample data."""
    global _provider
    _provider = provider or sample_daily_data


def get_daily_data(day: Optional[date] = None) -> DailyData:
    return _provider(day or board_now().date())
