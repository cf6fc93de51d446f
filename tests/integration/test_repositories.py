import pytest

from kodeshboard.db import schemas
from kodeshboard.db.repositories import display_configs as display_repo
from kodeshboard.db.repositories import prayer_times as prayer_repo
from kodeshboard.db.repositories import settings as settings_repo


def test_settings_repository_smoke(db_session):
    created = settings_repo.save_setting(db_session, "nusach", {"text": "אשכנז"})
    assert settings_repo.get_setting_text(db_session, "nusach", "text") == "אשכנז"
    assert settings_repo.get_setting_text(db_session, "nusach", "missing", "d") == "d"
    assert settings_repo.get_setting_text(db_session, "unknown", "text", "d") == "d"
    settings_repo.save_setting(db_session, "logo", {"url": 42})
    assert settings_repo.get_setting_text(db_session, "logo", "url", "none") == "none"

    again = settings_repo.save_setting(db_session, "nusach", {"text": "ספרד"})
    assert again.id == created.id
    assert settings_repo.get_settings_map(db_session) == {"nusach": {"text": "ספרד"}, "logo": {"url": 42}}

    deleted = settings_repo.delete_setting(db_session, created.id)
    assert deleted is not None
    assert settings_repo.get_setting(db_session, created.id) is None
    assert settings_repo.delete_setting(db_session, None) is None


def test_display_config_repository_smoke(db_session):
    content = schemas.ZoneContent(display_type="custom_text", title="t", content="c")
    saved = display_repo.save_zone_content(db_session, "template_1", "side_3", content)
    assert saved.config == {"title": "t", "content": "c"}

    by_zone = display_repo.get_configs_by_zone(db_session, "template_1")
    assert list(by_zone) == ["side_3"]
    assert display_repo.get_configs_by_zone(db_session, "template_2") == {}

    updated = display_repo.update_display_config(
        db_session, saved.id, schemas.DisplayConfigUpdate(display_type="daily_study"),
    )
    assert updated.display_type == "daily_study"
    assert updated.config == {}

    display_repo.delete_display_config(db_session, saved.id)
    assert display_repo.get_display_config(db_session, saved.id) is None


def test_prayer_time_repository_smoke(db_session, prayer_factory):
    prayer_factory("ערבית", fixed_time="19:00")
    prayer_factory("שיעור", type="lesson")

    created = prayer_repo.create_prayer_time(db_session, schemas.PrayerTimeCreate(
        name="מנחה", time_type="relative", anchor_time_id="mincha_ketana", offset_minutes=10,
        valid_on=[{"type": "special", "value": "fast_days"}],
    ))
    assert created.valid_on == [{"type": "special", "value": "fast_days"}]
    assert len(prayer_repo.get_prayer_times(db_session, event_type="prayer")) == 2

    replaced = prayer_repo.replace_prayer_time(db_session, created.id, schemas.PrayerTimeBase(name="מנחה גדולה"))
    assert replaced.name == "מנחה גדולה"
    assert replaced.time_type == "fixed"
    assert len(replaced.valid_on) == 7

    prayer_repo.delete_prayer_time(db_session, created.id)
    assert prayer_repo.get_prayer_time(db_session, created.id) is None


def test_delete_failure_rolls_back_and_raises(db_session, monkeypatch):
    created = settings_repo.save_setting(db_session, "logo", {"url": ""})

    def _boom():
        raise RuntimeError("commit failed")

    monkeypatch.setattr(db_session, "commit", _boom)
    with pytest.raises(RuntimeError, match="Failed to delete setting"):
        settings_repo.delete_setting(db_session, created.id)
