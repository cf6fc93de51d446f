import uuid
from datetime import date
from types import SimpleNamespace

from kodeshboard.db import schemas
from kodeshboard.services.board_service import build_zone_block, todays_events
from kodeshboard.services.daily_data import DailyData, SAMPLE_STUDY, SAMPLE_TIMES


def _day(weekday=0, special=()):
    return DailyData(
        date=date(2024, 11, 17), weekday=weekday, hebrew_date="", hebrew_day="", hebrew_month="",
        parsha="לך לך", special_day_types=special, times=dict(SAMPLE_TIMES), study=dict(SAMPLE_STUDY),
    )


def _event(name, event_type="prayer", valid_on=None, **time_fields):
    fields = {"time_type": "fixed", "fixed_time": "08:00", "anchor_time_id": None, "offset_minutes": 0}
    fields.update(time_fields)
    return SimpleNamespace(id=uuid.uuid4(), name=name, type=event_type, valid_on=valid_on or [], **fields)


def _config(display_type, config=None, color="#FFFFFF"):
    return SimpleNamespace(display_type=display_type, config=config or {}, zone_background_color=color)


def test_todays_events_filters_by_day_and_sorts_by_time():
    events = [
        _event("מנחה", time_type="relative", anchor_time_id="sunset_visible", offset_minutes=-15),
        _event("שחרית", fixed_time="06:30"),
        _event("שבת בלבד", valid_on=[{"type": "weekday", "value": 6}]),
        _event("שיעור", event_type="lesson", fixed_time="20:00"),
    ]
    prayers = todays_events(events, _day(weekday=0), "prayer")
    assert [(e.name, e.time) for e in prayers] == [("שחרית", "06:30"), ("מנחה", "16:50")]
    assert prayers[1].description == "שקיעה - 15 דקות"


def test_todays_events_special_day_and_show_all():
    events = [
        _event("הלל", valid_on=[{"type": "special", "value": "rosh_chodesh"}]),
    ]
    assert todays_events(events, _day(), "prayer") == []
    assert len(todays_events(events, _day(special=("rosh_chodesh",)), "prayer")) == 1
    assert len(todays_events(events, _day(), "prayer", show_all=True)) == 1


def test_unresolved_time_shows_dash():
    events = [_event("ערבית", time_type="relative", anchor_time_id="tzeit_unknown")]
    assert todays_events(events, _day(), "prayer")[0].time == "—"


def test_zone_block_unconfigured():
    block = build_zone_block("main", "אזור מרכזי", None, schemas.ConstantInfo(), _day())
    assert block.configured is False
    assert block.rows == []


def test_zone_block_daily_times_uses_selection():
    info = schemas.ConstantInfo(daily_times={"sunrise_visible": True, "chatzot_night": True, "tzeit": False})
    block = build_zone_block("main", "אזור מרכזי", _config("daily_times", color="#112233"), info, _day())
    assert block.title == "זמני היום"
    assert block.background_color == "#112233"
    assert [(r.key, r.value) for r in block.rows] == [("sunrise_visible", "06:45"), ("chatzot_night", "00:00")]


def test_zone_block_missing_value_shows_dash():
    info = schemas.ConstantInfo(daily_times={"yomtov_exit": True})
    block = build_zone_block("side_1", "", _config("daily_times"), info, _day())
    assert block.rows[0].value == "—"


def test_zone_block_custom_text_defaults_title():
    block = build_zone_block("side_1", "", _config("custom_text", {"content": "שבת שלום"}), schemas.ConstantInfo(), _day())
    assert block.title == "טקסט חופשי"
    assert block.content == "שבת שלום"
