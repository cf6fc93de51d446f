import uuid
from datetime import datetime
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, field_validator

from kodeshboard.utils.catalog import DEFAULT_NUSACH, NUSACH_OPTIONS


class SettingBase(BaseModel):
    key: str = Field(min_length=1, max_length=100)
    value: Dict[str, Any] = Field(default_factory=dict)


class SettingCreate(SettingBase):
    pass


class SettingUpdate(BaseModel):
    key: str | None = Field(default=None, min_length=1, max_length=100)
    value: Dict[str, Any] | None = None


class SettingValue(BaseModel):
    value: Dict[str, Any]


class Setting(SettingBase):
    id: uuid.UUID
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)


class GeneralSettings(BaseModel):
    synagogue_name: str = ""
    logo_url: str = ""
    nusach: str = DEFAULT_NUSACH
    bottom_marquee_text: str = ""

    @field_validator("nusach")
    @classmethod
    def _known_nusach(cls, value: str) -> str:
        if value not in NUSACH_OPTIONS:
            raise ValueError(f"nusach must be one of: {', '.join(NUSACH_OPTIONS)}")
        return value


class LogoUploadResult(BaseModel):
    file_url: str


class ConstantInfo(BaseModel):
    daily_times: Dict[str, bool] = Field(default_factory=dict)
    daily_study: Dict[str, bool] = Field(default_factory=dict)


class CatalogOption(BaseModel):
    key: str
    label: str
    default_selected: bool


class ConstantInfoOptions(BaseModel):
    daily_times: list[CatalogOption]
    daily_study: list[CatalogOption]
