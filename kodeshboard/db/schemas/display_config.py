import uuid
from datetime import datetime
from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from kodeshboard.utils.layouts import DEFAULT_BACKGROUND, get_template

DisplayType = Literal["daily_times", "daily_study", "custom_text"]
_COLOR_PATTERN = r"^#[0-9A-Fa-f]{6}$"


def _check_zone(template_id: Optional[str], zone_id: Optional[str]) -> None:
    if template_id is None:
        return
    template = get_template(template_id)
    if template is None:
        raise ValueError(f"Unknown template_id '{template_id}'")
    if zone_id is not None and not template.has_zone(zone_id):
        raise ValueError(f"Zone '{zone_id}' is not part of template '{template_id}'")


class DisplayConfigBase(BaseModel):
    template_id: str
    zone_id: str
    display_type: DisplayType = "custom_text"
    config: Dict[str, Any] = Field(default_factory=dict)
    zone_background_color: str = Field(default=DEFAULT_BACKGROUND, pattern=_COLOR_PATTERN)


class DisplayConfigCreate(DisplayConfigBase):
    @model_validator(mode="after")
    def _zone_in_template(self):
        _check_zone(self.template_id, self.zone_id)
        return self


class DisplayConfigUpdate(BaseModel):
    template_id: str | None = None
    zone_id: str | None = None
    display_type: DisplayType | None = None
    config: Dict[str, Any] | None = None
    zone_background_color: str | None = Field(default=None, pattern=_COLOR_PATTERN)


class DisplayConfig(DisplayConfigBase):
    id: uuid.UUID
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)


class ZoneContent(BaseModel):
    """Payload of the zone content editor."""
    display_type: DisplayType = "custom_text"
    title: str = ""
    content: str = ""
    zone_background_color: str = Field(default=DEFAULT_BACKGROUND, pattern=_COLOR_PATTERN)
    template_id: str | None = None

    def build_config(self) -> Dict[str, Any]:
        if self.display_type == "custom_text":
            return {"title": self.title, "content": self.content}
        return {}


class TemplateSelection(BaseModel):
    template_id: str

    @model_validator(mode="after")
    def _known_template(self):
        _check_zone(self.template_id, None)
        return self


class ZoneInfo(BaseModel):
    id: str
    name: str


class TemplateInfo(BaseModel):
    id: str
    name: str
    zones: list[ZoneInfo]


class LayoutZone(ZoneInfo):
    summary: str
    config: DisplayConfig | None = None


class Layout(BaseModel):
    template_id: str
    template_name: str
    zones: list[LayoutZone]
