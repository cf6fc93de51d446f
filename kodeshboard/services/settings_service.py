"""
Form-level settings operations.

Each admin form reads several keys of the settings store with form defaults
and saves them back through the upsert helper.
"""
from __future__ import annotations

import logging
from sqlalchemy.orm import Session

from kodeshboard.db import schemas
from kodeshboard.db.repositories import settings as settings_repo
from kodeshboard.utils.catalog import DAILY_STUDY, DAILY_TIMES, DEFAULT_NUSACH, NUSACH_OPTIONS, merge_selection
from kodeshboard.utils.layouts import DEFAULT_TEMPLATE_ID, get_template

logger = logging.getLogger(__name__)

SYNAGOGUE_NAME_KEY = "synagogue_name"
LOGO_KEY = "logo"
NUSACH_KEY = "nusach"
MARQUEE_KEY = "bottom_marquee_text"
TEMPLATE_KEY = "template_id"
DAILY_TIMES_KEY = "daily_times_config"
DAILY_STUDY_KEY = "daily_study_config"


def load_general_settings(db: Session) -> schemas.GeneralSettings:
    nusach = settings_repo.get_setting_text(db, NUSACH_KEY, "text", DEFAULT_NUSACH)
    if nusach not in NUSACH_OPTIONS:
        nusach = DEFAULT_NUSACH
    return schemas.GeneralSettings.model_construct(
        synagogue_name=settings_repo.get_setting_text(db, SYNAGOGUE_NAME_KEY, "text", ""),
        logo_url=settings_repo.get_setting_text(db, LOGO_KEY, "url", ""),
        nusach=nusach,
        bottom_marquee_text=settings_repo.get_setting_text(db, MARQUEE_KEY, "text", ""),
    )


def save_general_settings(db: Session, general: schemas.GeneralSettings) -> schemas.GeneralSettings:
    settings_repo.save_setting(db, SYNAGOGUE_NAME_KEY, {"text": general.synagogue_name})
    settings_repo.save_setting(db, LOGO_KEY, {"url": general.logo_url})
    settings_repo.save_setting(db, NUSACH_KEY, {"text": general.nusach})
    settings_repo.save_setting(db, MARQUEE_KEY, {"text": general.bottom_marquee_text})
    logger.info("general_settings_saved: synagogue_name=%s", general.synagogue_name)
    return general


def save_logo_url(db: Session, url: str) -> None:
    settings_repo.save_setting(db, LOGO_KEY, {"url": url})
    logger.info("logo_saved: url=%s", url)


def load_constant_info(db: Session) -> schemas.ConstantInfo:
    times = settings_repo.get_setting_by_key(db, DAILY_TIMES_KEY)
    study = settings_repo.get_setting_by_key(db, DAILY_STUDY_KEY)
    return schemas.ConstantInfo(
        daily_times=merge_selection(DAILY_TIMES, times.value if times else None),
        daily_study=merge_selection(DAILY_STUDY, study.value if study else None),
    )


def save_constant_info(db: Session, info: schemas.ConstantInfo) -> schemas.ConstantInfo:
    settings_repo.save_setting(db, DAILY_TIMES_KEY, info.daily_times)
    settings_repo.save_setting(db, DAILY_STUDY_KEY, info.daily_study)
    logger.info(
        "constant_info_saved: daily_times=%d daily_study=%d",
        sum(1 for v in info.daily_times.values() if v),
        sum(1 for v in info.daily_study.values() if v),
    )
    return load_constant_info(db)


def get_active_template_id(db: Session) -> str:
    """Stored template id, or the default when unset or no longer known."""
    template_id = settings_repo.get_setting_text(db, TEMPLATE_KEY, "id", DEFAULT_TEMPLATE_ID)
    if get_template(template_id) is None:
        logger.warning("unknown_template_setting: template_id=%s", template_id)
        return DEFAULT_TEMPLATE_ID
    return template_id


def set_active_template_id(db: Session, template_id: str) -> str:
    settings_repo.save_setting(db, TEMPLATE_KEY, {"id": template_id})
    logger.info("template_selected: template_id=%s", template_id)
    return template_id
