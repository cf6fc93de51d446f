from datetime import date

from kodeshboard.services.daily_data import DailyData, SAMPLE_STUDY, SAMPLE_TIMES, set_daily_data_provider


def _install_day(weekday, special=()):
    def provider(day):
        return DailyData(
            date=day, weekday=weekday, hebrew_date="ט״ז בחשון תשפ״ה", hebrew_day="ט״ז",
            hebrew_month="חשון", parsha="לך לך", special_day_types=special,
            times=dict(SAMPLE_TIMES), study=dict(SAMPLE_STUDY),
        )
    set_daily_data_provider(provider)


def test_board_defaults(client):
    _install_day(weekday=0)
    r = client.get("/display/data")
    assert r.status_code == 200
    board = r.json()
    assert board["header"]["synagogue_name"] == "בית הכנסת"
    assert board["header"]["weekday_name"] == "ראשון"
    assert board["header"]["parsha"] == "לך לך"
    assert board["template_id"] == "template_1"
    assert len(board["zones"]) == 7
    assert not any(z["configured"] for z in board["zones"])
    assert board["marquee_text"] == "ברוכים הבאים לבית הכנסת"
    assert board["refresh_seconds"] == 300
    assert board["prayers"] == [] and board["lessons"] == []


def test_board_reflects_settings_layout_and_schedule(client):
    _install_day(weekday=6)
    client.put("/settings/general", json={
        "synagogue_name": "אוהל משה", "logo_url": "/uploads/logo.png",
        "nusach": "ספרד", "bottom_marquee_text": "שבת שלום",
    })
    client.put("/constant-info", json={"daily_times": {"tzeit_r_tam": True}, "daily_study": {}})
    client.put("/layout/zones/main", json={"display_type": "daily_times", "zone_background_color": "#F5F5DC"})
    client.put("/layout/zones/side_1", json={"display_type": "custom_text", "title": "הודעות", "content": "קידוש"})
    client.post("/prayer-times/", json={"name": "שחרית", "fixed_time": "08:30"})
    client.post("/prayer-times/", json={
        "name": "מנחה", "time_type": "relative", "anchor_time_id": "sunset_visible", "offset_minutes": -20,
    })
    client.post("/prayer-times/", json={
        "name": "סליחות", "fixed_time": "05:00", "valid_on": [{"type": "weekday", "value": 1}],
    })
    client.post("/prayer-times/", json={"name": "שיעור פרשה", "type": "lesson", "fixed_time": "16:00"})

    board = client.get("/display/data").json()
    assert board["header"]["synagogue_name"] == "אוהל משה"
    assert board["header"]["logo_url"] == "/uploads/logo.png"
    assert board["header"]["weekday_name"] == "שבת"
    assert board["marquee_text"] == "שבת שלום"

    zones = {z["zone_id"]: z for z in board["zones"]}
    main = zones["main"]
    assert main["configured"] and main["background_color"] == "#F5F5DC"
    row_keys = [row["key"] for row in main["rows"]]
    assert "tzeit_r_tam" in row_keys and "sunrise_visible" in row_keys
    assert zones["side_1"]["title"] == "הודעות"
    assert zones["side_1"]["content"] == "קידוש"
    assert zones["side_2"]["configured"] is False

    assert [(p["name"], p["time"]) for p in board["prayers"]] == [("שחרית", "08:30"), ("מנחה", "16:45")]
    assert [lesson["name"] for lesson in board["lessons"]] == ["שיעור פרשה"]


def test_show_all_events_ignores_validity_days(client, monkeypatch):
    _install_day(weekday=3)
    client.post("/prayer-times/", json={"name": "סליחות", "valid_on": [{"type": "weekday", "value": 1}]})
    assert client.get("/display/data").json()["prayers"] == []

    monkeypatch.setenv("DISPLAY_SHOW_ALL_EVENTS", "true")
    from kodeshboard.utils.config import refresh_config_cache
    refresh_config_cache()
    assert [p["name"] for p in client.get("/display/data").json()["prayers"]] == ["סליחות"]


def test_special_day_event_on_board(client):
    _install_day(weekday=2, special=("rosh_chodesh",))
    client.post("/prayer-times/", json={"name": "הלל", "valid_on": [{"type": "special", "value": "rosh_chodesh"}]})
    assert [p["name"] for p in client.get("/display/data").json()["prayers"]] == ["הלל"]


def test_display_page_renders_html(client):
    _install_day(weekday=0)
    client.put("/layout/template", json={"template_id": "template_2"})
    client.put("/layout/zones/zone_5", json={"display_type": "custom_text", "title": "<b>הודעה</b>", "content": "x"})
    client.post("/prayer-times/", json={"name": "ערבית", "fixed_time": "18:30"})

    r = client.get("/display")
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/html")
    html = r.text
    assert 'dir="rtl"' in html
    assert 'http-equiv="refresh" content="300"' in html
    assert "לחץ כאן להגדרת האזור" in html
    assert "&lt;b&gt;הודעה&lt;/b&gt;" in html
    assert "ערבית" in html and "18:30" in html


def test_health_and_build_info(client):
    assert client.get("/health").json()["status"] == "ok"
    r = client.get("/build-info")
    assert r.status_code == 200
    assert r.json()["service_name"] == "kodeshboard-service"
    assert "version" in r.json()


def test_board_ignores_non_text_setting_values(client):
    _install_day(weekday=0)
    client.put("/settings/by-key/synagogue_name", json={"value": {"text": 123}})
    client.put("/settings/by-key/logo", json={"value": {"url": ["a.png"]}})
    client.put("/settings/by-key/bottom_marquee_text", json={"value": {"text": {"he": "x"}}})
    client.put("/settings/by-key/nusach", json={"value": {"text": False}})
    client.put("/settings/by-key/template_id", json={"value": {"id": [1]}})
    client.post("/display-configs/", json={
        "template_id": "template_1", "zone_id": "main", "display_type": "custom_text",
        "config": {"title": 7, "content": None},
    })

    r = client.get("/display/data")
    assert r.status_code == 200, r.text
    board = r.json()
    assert board["header"]["synagogue_name"] == "בית הכנסת"
    assert board["header"]["logo_url"] == ""
    assert board["marquee_text"] == "ברוכים הבאים לבית הכנסת"
    assert board["template_id"] == "template_1"
    main = next(z for z in board["zones"] if z["zone_id"] == "main")
    assert main["title"] == "טקסט חופשי"
    assert main["content"] == ""

    assert client.get("/display").status_code == 200
    general = client.get("/settings/general")
    assert general.status_code == 200
    assert general.json() == {"synagogue_name": "", "logo_url": "", "nusach": "ספרד", "bottom_marquee_text": ""}


def test_display_page_clock_ticks(client):
    _install_day(weekday=0)
    html = client.get("/display").text
    assert 'id="board-clock"' in html
    assert 'data-time="' in html
    assert "setInterval" in html
