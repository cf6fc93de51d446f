import uuid
from typing import List, Optional

from pydantic import BaseModel


class BoardRow(BaseModel):
    key: str
    label: str
    value: str


class BoardEvent(BaseModel):
    id: uuid.UUID
    name: str
    type: str
    time: str
    description: str


class ZoneBlock(BaseModel):
    zone_id: str
    zone_name: str
    configured: bool
    display_type: Optional[str] = None
    title: str = ""
    background_color: str = "#FFFFFF"
    rows: List[BoardRow] = []
    content: str = ""


class BoardHeader(BaseModel):
    synagogue_name: str
    logo_url: str
    current_time: str
    weekday_name: str
    parsha: str
    hebrew_date: str


class BoardView(BaseModel):
    """Everything the kiosk screen renders in one payload."""
    header: BoardHeader
    template_id: str
    zones: List[ZoneBlock]
    prayers: List[BoardEvent]
    lessons: List[BoardEvent]
    marquee_text: str
    refresh_seconds: int
