"""
Settings API endpoints.

Generic CRUD over the key/value settings store, plus the general-information
form (synagogue name, logo, nusach, marquee text) and logo upload.
"""
import logging
import os
import uuid
from pathlib import Path
from typing import List, Optional

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status
from sqlalchemy.orm import Session

from kodeshboard.db import schemas
from kodeshboard.db.database import get_db
from kodeshboard.db.repositories import settings as settings_repo
from kodeshboard.services import settings_service
from kodeshboard.utils.config import get_config

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("/", response_model=List[schemas.Setting])
def list_settings(
    key: Optional[str] = None,
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db),
):
    return settings_repo.get_settings(db, key=key, skip=skip, limit=limit)


@router.post("/", response_model=schemas.Setting, status_code=status.HTTP_201_CREATED)
def create_setting(setting: schemas.SettingCreate, db: Session = Depends(get_db)):
    if settings_repo.get_setting_by_key(db, setting.key):
        raise HTTPException(status_code=409, detail="Setting with this key already exists")
    return settings_repo.create_setting(db, setting)


@router.get("/general", response_model=schemas.GeneralSettings)
def get_general_settings(db: Session = Depends(get_db)):
    return settings_service.load_general_settings(db)


@router.put("/general", response_model=schemas.GeneralSettings)
def save_general_settings(general: schemas.GeneralSettings, db: Session = Depends(get_db)):
    return settings_service.save_general_settings(db, general)


@router.post("/logo", response_model=schemas.LogoUploadResult, status_code=status.HTTP_201_CREATED)
async def upload_logo(file: UploadFile = File(...), db: Session = Depends(get_db)):
    """Store an uploaded logo image and point the `logo` setting at it."""
    content_type = file.content_type or ""
    if not content_type.startswith("image/"):
        raise HTTPException(status_code=400, detail="Only image files can be uploaded")

    config = get_config()
    data = await file.read()
    if not data:
        raise HTTPException(status_code=400, detail="Uploaded file is empty")
    if len(data) > config.max_upload_bytes:
        raise HTTPException(status_code=413, detail="Uploaded file is too large")

    suffix = Path(file.filename or "").suffix.lower()
    if not suffix or len(suffix) > 8:
        suffix = "." + content_type.split("/", 1)[1].split("+", 1)[0]
    filename = f"logo-{uuid.uuid4().hex}{suffix}"
    os.makedirs(config.upload_dir, exist_ok=True)
    try:
        with open(os.path.join(config.upload_dir, filename), "wb") as fh:
            fh.write(data)
    except OSError as e:
        logger.error("logo_upload_failed: filename=%s error=%s", filename, e)
        raise HTTPException(status_code=500, detail="Could not store the uploaded logo")

    file_url = f"{config.upload_url_prefix}/{filename}"
    settings_service.save_logo_url(db, file_url)
    return schemas.LogoUploadResult(file_url=file_url)


@router.put("/by-key/{key}", response_model=schemas.Setting)
def save_setting_by_key(key: str, payload: schemas.SettingValue, db: Session = Depends(get_db)):
    """Upsert: update the value stored under `key`, creating the setting when missing."""
    return settings_repo.save_setting(db, key, payload.value)


@router.get("/by-key/{key}", response_model=schemas.Setting)
def get_setting_by_key(key: str, db: Session = Depends(get_db)):
    db_setting = settings_repo.get_setting_by_key(db, key)
    if not db_setting:
        raise HTTPException(status_code=404, detail="Setting not found")
    return db_setting


@router.get("/{setting_id}", response_model=schemas.Setting)
def get_setting(setting_id: uuid.UUID, db: Session = Depends(get_db)):
    db_setting = settings_repo.get_setting(db, setting_id)
    if not db_setting:
        raise HTTPException(status_code=404, detail="Setting not found")
    return db_setting


@router.put("/{setting_id}", response_model=schemas.Setting)
def update_setting(setting_id: uuid.UUID, setting: schemas.SettingUpdate, db: Session = Depends(get_db)):
    db_setting = settings_repo.get_setting(db, setting_id)
    if not db_setting:
        raise HTTPException(status_code=404, detail="Setting not found")
    if setting.key and setting.key != db_setting.key:
        existing = settings_repo.get_setting_by_key(db, setting.key)
        if existing and existing.id != setting_id:
            raise HTTPException(status_code=409, detail="Setting with this key already exists")
    return settings_repo.update_setting(db, setting_id, setting)


@router.delete("/{setting_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_setting(setting_id: uuid.UUID, db: Session = Depends(get_db)):
    if not settings_repo.get_setting(db, setting_id):
        raise HTTPException(status_code=404, detail="Setting not found")
    settings_repo.delete_setting(db, setting_id)
    return None
