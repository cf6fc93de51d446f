"""Display template catalog: which zones each board layout offers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple


@dataclass(frozen=True)
class Zone:
    id: str
    name: str


@dataclass(frozen=True)
class LayoutTemplate:
    id: str
    name: str
    zones: Tuple[Zone, ...]

    def zone_ids(self) -> Tuple[str, ...]:
        return tuple(zone.id for zone in self.zones)

    def has_zone(self, zone_id: str) -> bool:
        return zone_id in self.zone_ids()


DEFAULT_TEMPLATE_ID = "template_1"

TEMPLATES: Dict[str, LayoutTemplate] = {
    "template_1": LayoutTemplate(
        id="template_1",
        name="תבנית עם אזור מרכזי גדול ואזורים צדדיים",
        zones=(Zone("main", "אזור מרכזי"),)
        + tuple(Zone(f"side_{i}", f"אזור צדדי {i}") for i in range(1, 7)),
    ),
    "template_2": LayoutTemplate(
        id="template_2",
        name="תבנית עם 9 אזורים שווים",
        zones=tuple(Zone(f"zone_{i}", f"אזור {i}") for i in range(1, 10)),
    ),
}

DISPLAY_TYPES: Dict[str, str] = {
    "daily_times": "זמני היום",
    "daily_study": "לימוד יומי",
    "custom_text": "טקסט חופשי",
}
UNCONFIGURED_LABEL = "לא הוגדר"
DEFAULT_BACKGROUND = "#FFFFFF"


def get_template(template_id: Optional[str]) -> Optional[LayoutTemplate]:
    if not template_id:
        return None
    return TEMPLATES.get(template_id)


def resolve_template(template_id: Optional[str]) -> LayoutTemplate:
    """Return the named template, falling back to the default layout."""
    return get_template(template_id) or TEMPLATES[DEFAULT_TEMPLATE_ID]


def zone_summary(display_type: Optional[str], config: Optional[dict]) -> str:
    """Short description of a zone's content for the layout editor."""
    if display_type == "custom_text":
        title = (config or {}).get("title") or ""
        return f"טקסט: {title}"
    if display_type in ("daily_times", "daily_study"):
        return DISPLAY_TYPES[display_type]
    return UNCONFIGURED_LABEL
