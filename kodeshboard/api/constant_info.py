"""
Constant-information endpoints.

Which daily halachic times and daily study portions the board shows.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from kodeshboard.db import schemas
from kodeshboard.db.database import get_db
from kodeshboard.services import settings_service
from kodeshboard.utils.catalog import DAILY_STUDY, DAILY_TIMES

router = APIRouter(prefix="/constant-info", tags=["constant-info"])


def _options(entries):
    return [
        schemas.CatalogOption(key=e.key, label=e.label, default_selected=e.default_selected)
        for e in entries
    ]


@router.get("", response_model=schemas.ConstantInfo)
def get_constant_info(db: Session = Depends(get_db)):
    return settings_service.load_constant_info(db)


@router.put("", response_model=schemas.ConstantInfo)
def save_constant_info(info: schemas.ConstantInfo, db: Session = Depends(get_db)):
    return settings_service.save_constant_info(db, info)


@router.get("/options", response_model=schemas.ConstantInfoOptions)
def get_constant_info_options():
    return schemas.ConstantInfoOptions(
        daily_times=_options(DAILY_TIMES),
        daily_study=_options(DAILY_STUDY),
    )
