"""
Pydantic schemas for the board's entity stores and views.

Re-exports every schema so callers can use `schemas.Setting`,
`schemas.PrayerTimeCreate`, and so on.
"""

from .settings import (
    SettingBase,
    SettingCreate,
    SettingUpdate,
    SettingValue,
    Setting,
    GeneralSettings,
    LogoUploadResult,
    ConstantInfo,
    CatalogOption,
    ConstantInfoOptions,
)
from .display_config import (
    DisplayConfigBase,
    DisplayConfigCreate,
    DisplayConfigUpdate,
    DisplayConfig,
    ZoneContent,
    TemplateSelection,
    ZoneInfo,
    TemplateInfo,
    LayoutZone,
    Layout,
)
from .prayer_times import (
    ValidOnItem,
    PrayerTimeBase,
    PrayerTimeCreate,
    PrayerTimeUpdate,
    PrayerTime,
    ScheduleRow,
    EventForm,
)
from .display import BoardRow, BoardEvent, ZoneBlock, BoardHeader, BoardView

__all__ = [
    # settings
    "SettingBase",
    "SettingCreate",
    "SettingUpdate",
    "SettingValue",
    "Setting",
    "GeneralSettings",
    "LogoUploadResult",
    "ConstantInfo",
    "CatalogOption",
    "ConstantInfoOptions",
    # display configs
    "DisplayConfigBase",
    "DisplayConfigCreate",
    "DisplayConfigUpdate",
    "DisplayConfig",
    "ZoneContent",
    "TemplateSelection",
    "ZoneInfo",
    "TemplateInfo",
    "LayoutZone",
    "Layout",
    # schedule
    "ValidOnItem",
    "PrayerTimeBase",
    "PrayerTimeCreate",
    "PrayerTimeUpdate",
    "PrayerTime",
    "ScheduleRow",
    "EventForm",
    # board
    "BoardRow",
    "BoardEvent",
    "ZoneBlock",
    "BoardHeader",
    "BoardView",
]
