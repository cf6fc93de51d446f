import pytest

from kodeshboard.utils.schedule import (
    ALL_DAYS_LABEL,
    ALL_WEEKDAYS_LABEL,
    applies_on,
    format_clock,
    format_event_time,
    format_valid_days,
    new_event_defaults,
    parse_clock,
    prayer_type_label,
    resolve_event_time,
    selection_from_valid_on,
    sort_key,
    valid_on_from_selection,
)

TIMES = {"sunrise_visible": "06:45", "sunset_visible": "17:05", "tzeit": "23:50"}


def _relative(anchor="sunset_visible", offset=0, **extra):
    return {"time_type": "relative", "anchor_time_id": anchor, "offset_minutes": offset, **extra}


@pytest.mark.parametrize(
    "value,expected",
    [("08:00", 480), ("7:05", 425), ("23:59", 1439), ("24:00", None), ("8:5", None), ("", None), (None, None)],
)
def test_parse_clock(value, expected):
    assert parse_clock(value) == expected


def test_format_clock_wraps_around_midnight():
    assert format_clock(0) == "00:00"
    assert format_clock(1440 + 15) == "00:15"
    assert format_clock(-10) == "23:50"


def test_fixed_time_is_shown_as_is():
    assert resolve_event_time({"time_type": "fixed", "fixed_time": "07:30"}, TIMES) == "07:30"


def test_relative_time_adds_offset_to_anchor():
    assert resolve_event_time(_relative(offset=-15), TIMES) == "16:50"
    assert resolve_event_time(_relative(anchor="sunrise_visible", offset=20), TIMES) == "07:05"


def test_relative_time_wraps_past_midnight():
    assert resolve_event_time(_relative(anchor="tzeit", offset=30), TIMES) == "00:20"


def test_relative_time_unresolved_when_anchor_missing():
    assert resolve_event_time(_relative(anchor="chatzot_night"), TIMES) is None
    assert resolve_event_time(_relative(anchor=None), TIMES) is None


def test_format_event_time_describes_offset():
    assert format_event_time(_relative(offset=0)) == "שקיעה"
    assert format_event_time(_relative(offset=20)) == "שקיעה + 20 דקות"
    assert format_event_time(_relative(offset=-10)) == "שקיעה - 10 דקות"
    assert format_event_time({"time_type": "fixed", "fixed_time": "06:15"}) == "06:15"
    assert format_event_time(_relative(anchor=None)) == "—"


def test_empty_valid_on_means_every_day():
    event = {"valid_on": []}
    assert all(applies_on(event, day) for day in range(7))
    assert format_valid_days(event) == ALL_DAYS_LABEL


def test_weekday_membership():
    event = {"valid_on": [{"type": "weekday", "value": 0}, {"type": "weekday", "value": 2}]}
    assert applies_on(event, 0)
    assert applies_on(event, 2)
    assert not applies_on(event, 6)
    assert format_valid_days(event) == "ראשון, שלישי"


def test_special_day_matches_even_on_unlisted_weekday():
    event = {"valid_on": [{"type": "weekday", "value": 1}, {"type": "special", "value": "rosh_chodesh"}]}
    assert applies_on(event, 4, special_day_types=("rosh_chodesh",))
    assert not applies_on(event, 4, special_day_types=("chanukah",))
    assert not applies_on(event, 4)


def test_format_valid_days_all_weekdays_plus_special():
    event = {"valid_on": [{"type": "weekday", "value": d} for d in range(7)] + [{"type": "special", "value": "purim"}]}
    assert format_valid_days(event) == f"{ALL_WEEKDAYS_LABEL}, פורים"


def test_prayer_type_label():
    assert prayer_type_label("mincha") == "מנחה"
    assert prayer_type_label(None) == "-"
    assert prayer_type_label("custom") == "custom"


def test_selection_round_trip_keeps_days():
    valid_on = [{"type": "weekday", "value": 5}, {"type": "special", "value": "fast_days"}]
    selection = selection_from_valid_on(valid_on)
    assert selection["days"]["friday"] is True
    assert selection["days"]["sunday"] is False
    assert selection["special_days"]["fast_days"] is True
    assert valid_on_from_selection(selection["days"], selection["special_days"]) == valid_on


def test_new_event_defaults_cover_every_weekday():
    defaults = new_event_defaults()
    assert defaults["time_type"] == "fixed"
    assert defaults["fixed_time"] == "08:00"
    assert [item["value"] for item in defaults["valid_on"]] == list(range(7))


def test_sort_key_puts_unresolved_last():
    rows = [
        _relative(anchor="chatzot_night", name="א"),
        {"time_type": "fixed", "fixed_time": "18:00", "name": "ערבית"},
        {"time_type": "fixed", "fixed_time": "06:30", "name": "שחרית"},
    ]
    ordered = sorted(rows, key=lambda r: sort_key(r, TIMES))
    assert [r["name"] for r in ordered] == ["שחרית", "ערבית", "א"]
