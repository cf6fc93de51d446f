"""
Display-config repository functions.

One row per (template_id, zone_id): what a zone of a board layout shows.
"""
from __future__ import annotations

import uuid
from typing import Dict, Optional
from sqlalchemy.orm import Session

from kodeshboard.db import models, schemas


def _config_for_type(display_type: str, config):
    # Only custom text zones carry content
    if display_type != "custom_text":
        return {}
    return dict(config or {})


def create_display_config(db: Session, display_config: schemas.DisplayConfigCreate):
    db_config = models.DisplayConfig(**display_config.model_dump())
    db_config.config = _config_for_type(db_config.display_type, db_config.config)
    db.add(db_config)
    db.commit()
    db.refresh(db_config)
    return db_config


def get_display_config(db: Session, config_id: uuid.UUID):
    return db.query(models.DisplayConfig).filter(models.DisplayConfig.id == config_id).first()


def get_display_config_for_zone(db: Session, template_id: str, zone_id: str):
    return db.query(models.DisplayConfig).filter(
        models.DisplayConfig.template_id == template_id,
        models.DisplayConfig.zone_id == zone_id,
    ).first()


def get_display_configs(
    db: Session,
    template_id: Optional[str] = None,
    skip: int = 0,
    limit: int = 100,
):
    q = db.query(models.DisplayConfig)
    if template_id is not None:
        q = q.filter(models.DisplayConfig.template_id == template_id)
    return q.order_by(models.DisplayConfig.template_id, models.DisplayConfig.zone_id).offset(skip).limit(limit).all()


def get_configs_by_zone(db: Session, template_id: str) -> Dict[str, models.DisplayConfig]:
    """Map zone id to its config for one template."""
    configs = db.query(models.DisplayConfig).filter(models.DisplayConfig.template_id == template_id).all()
    return {config.zone_id: config for config in configs}


def update_display_config(db: Session, config_id: uuid.UUID, display_config: schemas.DisplayConfigUpdate):
    db_config = db.query(models.DisplayConfig).filter(models.DisplayConfig.id == config_id).first()
    if db_config:
        for key, value in display_config.model_dump(exclude_unset=True).items():
            if value is None:
                continue
            setattr(db_config, key, value)
        db_config.config = _config_for_type(db_config.display_type, db_config.config)
        db.commit()
        db.refresh(db_config)
    return db_config


def save_zone_content(db: Session, template_id: str, zone_id: str, content: schemas.ZoneContent):
    """Zone editor save: update the zone's config in place or create it."""
    config_data = content.build_config()
    db_config = get_display_config_for_zone(db, template_id, zone_id)
    if db_config:
        db_config.display_type = content.display_type
        db_config.config = config_data
        db_config.zone_background_color = content.zone_background_color
        db.commit()
        db.refresh(db_config)
        return db_config
    return create_display_config(
        db,
        schemas.DisplayConfigCreate(
            template_id=template_id,
            zone_id=zone_id,
            display_type=content.display_type,
            config=config_data,
            zone_background_color=content.zone_background_color,
        ),
    )


def delete_display_config(db: Session, config_id: uuid.UUID):
    """Delete a display config with proper error handling."""
    if config_id is None:
        return None
    try:
        db_config = db.query(models.DisplayConfig).filter(models.DisplayConfig.id == config_id).first()
        if db_config:
            db.delete(db_config)
            db.commit()
        return db_config
    except Exception as e:
        db.rollback()
        raise RuntimeError(f"Failed to delete display config {config_id}: {str(e)}")
