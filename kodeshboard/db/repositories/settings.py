"""
Settings repository functions.

Generic key/value store: one row per key, the value is a JSON object.
"""
from __future__ import annotations

import logging
import uuid
from typing import Any, Dict, Optional
from sqlalchemy.orm import Session

from kodeshboard.db import models, schemas

logger = logging.getLogger(__name__)


def create_setting(db: Session, setting: schemas.SettingCreate):
    db_setting = models.Setting(key=setting.key, value=dict(setting.value))
    db.add(db_setting)
    db.commit()
    db.refresh(db_setting)
    return db_setting


def get_setting(db: Session, setting_id: uuid.UUID):
    return db.query(models.Setting).filter(models.Setting.id == setting_id).first()


def get_setting_by_key(db: Session, key: str):
    return db.query(models.Setting).filter(models.Setting.key == key).first()


def get_settings(db: Session, key: Optional[str] = None, skip: int = 0, limit: int = 100):
    q = db.query(models.Setting)
    if key is not None:
        q = q.filter(models.Setting.key == key)
    return q.order_by(models.Setting.key).offset(skip).limit(limit).all()


def get_settings_map(db: Session) -> Dict[str, Dict[str, Any]]:
    """Return every stored value keyed by setting key."""
    return {s.key: (s.value or {}) for s in db.query(models.Setting).all()}


def update_setting(db: Session, setting_id: uuid.UUID, setting: schemas.SettingUpdate):
    db_setting = db.query(models.Setting).filter(models.Setting.id == setting_id).first()
    if db_setting:
        for key, value in setting.model_dump(exclude_unset=True).items():
            if value is None:
                continue
            setattr(db_setting, key, dict(value) if key == 'value' else value)
        db.commit()
        db.refresh(db_setting)
    return db_setting


def save_setting(db: Session, key: str, value: Dict[str, Any]):
    """Update the setting stored under ``key`` or create it."""
    db_setting = get_setting_by_key(db, key)
    if db_setting:
        db_setting.value = dict(value)
        db.commit()
        db.refresh(db_setting)
        logger.debug("setting_updated: key=%s", key)
        return db_setting
    created = create_setting(db, schemas.SettingCreate(key=key, value=value))
    logger.debug("setting_created: key=%s", key)
    return created


def text_value(value: Any, field: str, default: str = "") -> str:
    """Return ``value[field]`` when it is a non-empty string, else ``default``."""
    if isinstance(value, dict):
        text = value.get(field)
        if isinstance(text, str) and text:
            return text
    return default


def get_setting_text(db: Session, key: str, field: str, default: str = "") -> str:
    db_setting = get_setting_by_key(db, key)
    return text_value(db_setting.value if db_setting else None, field, default)


def delete_setting(db: Session, setting_id: uuid.UUID):
    """Delete a setting with proper error handling."""
    if setting_id is None:
        return None
    try:
        db_setting = db.query(models.Setting).filter(models.Setting.id == setting_id).first()
        if db_setting:
            db.delete(db_setting)
            db.commit()
        return db_setting
    except Exception as e:
        db.rollback()
        raise RuntimeError(f"Failed to delete setting {setting_id}: {str(e)}")
