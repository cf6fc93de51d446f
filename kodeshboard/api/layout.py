"""
Display layout endpoints.

Template selection, the zone overview of the active template, the zone
content editor, and generic CRUD over the display-config store.
"""
import logging
import uuid
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from kodeshboard.db import schemas
from kodeshboard.db.database import get_db
from kodeshboard.db.repositories import display_configs as display_repo
from kodeshboard.services import settings_service
from kodeshboard.utils.layouts import TEMPLATES, get_template, zone_summary

logger = logging.getLogger(__name__)

router = APIRouter(tags=["layout"])


def _template_info(template) -> schemas.TemplateInfo:
    return schemas.TemplateInfo(
        id=template.id,
        name=template.name,
        zones=[schemas.ZoneInfo(id=z.id, name=z.name) for z in template.zones],
    )


def _layout(db: Session, template_id: str) -> schemas.Layout:
    template = get_template(template_id)
    configs = display_repo.get_configs_by_zone(db, template.id)
    zones = []
    for zone in template.zones:
        config = configs.get(zone.id)
        zones.append(schemas.LayoutZone(
            id=zone.id,
            name=zone.name,
            summary=zone_summary(config.display_type if config else None, config.config if config else None),
            config=schemas.DisplayConfig.model_validate(config) if config else None,
        ))
    return schemas.Layout(template_id=template.id, template_name=template.name, zones=zones)


@router.get("/layout/templates", response_model=List[schemas.TemplateInfo])
def list_templates():
    return [_template_info(t) for t in TEMPLATES.values()]


@router.get("/layout", response_model=schemas.Layout)
def get_layout(template_id: Optional[str] = None, db: Session = Depends(get_db)):
    """Zones of a template (default: the active one) with their stored content."""
    if template_id is not None and get_template(template_id) is None:
        raise HTTPException(status_code=422, detail=f"Unknown template_id '{template_id}'")
    return _layout(db, template_id or settings_service.get_active_template_id(db))


@router.put("/layout/template", response_model=schemas.Layout)
def select_template(selection: schemas.TemplateSelection, db: Session = Depends(get_db)):
    settings_service.set_active_template_id(db, selection.template_id)
    return _layout(db, selection.template_id)


@router.put("/layout/zones/{zone_id}", response_model=schemas.DisplayConfig)
def save_zone(zone_id: str, content: schemas.ZoneContent, db: Session = Depends(get_db)):
    template_id = content.template_id or settings_service.get_active_template_id(db)
    template = get_template(template_id)
    if template is None:
        raise HTTPException(status_code=422, detail=f"Unknown template_id '{template_id}'")
    if not template.has_zone(zone_id):
        raise HTTPException(status_code=422, detail=f"Zone '{zone_id}' is not part of template '{template_id}'")
    saved = display_repo.save_zone_content(db, template_id, zone_id, content)
    logger.info("zone_saved: template=%s zone=%s type=%s", template_id, zone_id, content.display_type)
    return saved


@router.get("/display-configs/", response_model=List[schemas.DisplayConfig])
def list_display_configs(
    template_id: Optional[str] = None,
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db),
):
    return display_repo.get_display_configs(db, template_id=template_id, skip=skip, limit=limit)


@router.post("/display-configs/", response_model=schemas.DisplayConfig, status_code=status.HTTP_201_CREATED)
def create_display_config(display_config: schemas.DisplayConfigCreate, db: Session = Depends(get_db)):
    if display_repo.get_display_config_for_zone(db, display_config.template_id, display_config.zone_id):
        raise HTTPException(status_code=409, detail="Zone already has a display config")
    return display_repo.create_display_config(db, display_config)


@router.get("/display-configs/{config_id}", response_model=schemas.DisplayConfig)
def get_display_config(config_id: uuid.UUID, db: Session = Depends(get_db)):
    db_config = display_repo.get_display_config(db, config_id)
    if not db_config:
        raise HTTPException(status_code=404, detail="Display config not found")
    return db_config


@router.put("/display-configs/{config_id}", response_model=schemas.DisplayConfig)
def update_display_config(
    config_id: uuid.UUID,
    display_config: schemas.DisplayConfigUpdate,
    db: Session = Depends(get_db),
):
    db_config = display_repo.get_display_config(db, config_id)
    if not db_config:
        raise HTTPException(status_code=404, detail="Display config not found")
    template_id = display_config.template_id or db_config.template_id
    zone_id = display_config.zone_id or db_config.zone_id
    template = get_template(template_id)
    if template is None or not template.has_zone(zone_id):
        raise HTTPException(status_code=422, detail="Zone is not part of the template")
    if (template_id, zone_id) != (db_config.template_id, db_config.zone_id):
        existing = display_repo.get_display_config_for_zone(db, template_id, zone_id)
        if existing and existing.id != config_id:
            raise HTTPException(status_code=409, detail="Zone already has a display config")
    return display_repo.update_display_config(db, config_id, display_config)


@router.delete("/display-configs/{config_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_display_config(config_id: uuid.UUID, db: Session = Depends(get_db)):
    if not display_repo.get_display_config(db, config_id):
        raise HTTPException(status_code=404, detail="Display config not found")
    display_repo.delete_display_config(db, config_id)
    return None
