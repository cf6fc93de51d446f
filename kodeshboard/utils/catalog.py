"""Static catalogs for daily times, daily study and schedule vocabulary.

Keys are the identifiers stored in settings and schedule rows; labels are the
Hebrew strings shown in the admin forms and on the board.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple


@dataclass(frozen=True)
class CatalogEntry:
    key: str
    label: str
    board_label: str
    default_selected: bool = False


DAILY_TIMES: Tuple[CatalogEntry, ...] = (
    CatalogEntry("alos_hashachar", "עלות השחר", "עלות השחר"),
    CatalogEntry("mi_sheyakir", "משיכיר", "משיכיר"),
    CatalogEntry("tzitzit_tefillin", "זמן טלית ותפילין", "זמן טלית ותפילין"),
    CatalogEntry("sunrise_plain", "זריחה מישורית", "זריחה מישורית"),
    CatalogEntry("sunrise_visible", "הנץ החמה", "הנץ החמה", True),
    CatalogEntry("shema_mga", 'סוף זמן קריאת שמע מג"א', "סוף זמן ק״ש מג״א"),
    CatalogEntry("shema_gra", 'סוף זמן קריאת שמע גר"א', "סוף זמן ק״ש גר״א", True),
    CatalogEntry("tefila_mga", 'סוף זמן תפילה מג"א', "סוף זמן תפילה מג״א"),
    CatalogEntry("tefila_gra", 'סוף זמן תפילה גר"א', "סוף זמן תפילה גר״א"),
    CatalogEntry("chatzot_day", "חצות היום", "חצות היום", True),
    CatalogEntry("mincha_gedola", "מנחה גדולה", "מנחה גדולה", True),
    CatalogEntry("mincha_ketana", "מנחה קטנה", "מנחה קטנה", True),
    CatalogEntry("plag_hamincha", "פלג המנחה", "פלג המנחה", True),
    CatalogEntry("sunset_plain", "שקיעה מישורית", "שקיעה מישורית"),
    CatalogEntry("sunset_visible", "שקיעה נראית", "שקיעה", True),
    CatalogEntry("tzeit", "צאת הכוכבים", "צאת הכוכבים", True),
    CatalogEntry("tzeit_r_tam", "צאת הכוכבים לרבנו תם", "ר״ת"),
    CatalogEntry("chatzot_night", "חצות הלילה", "חצות הלילה"),
    CatalogEntry("candle_lighting", "הדלקת נרות", "הדלקת נרות", True),
    CatalogEntry("yomtov_entry", "כניסת חג", "כניסת החג", True),
    CatalogEntry("shabbat_exit", "צאת שבת", "צאת השבת", True),
    CatalogEntry("yomtov_exit", "צאת חג", "צאת החג", True),
)

DAILY_STUDY: Tuple[CatalogEntry, ...] = (
    CatalogEntry("daf_yomi", "דף יומי", "דף יומי", True),
    CatalogEntry("daf_yomi_yerushalmi", "דף יומי ירושלמי", "דף יומי ירושלמי"),
    CatalogEntry("halacha_yomit", "דף יומי בהלכה", "הלכה יומית"),
    CatalogEntry("amud_yomi_dirshu", "עמוד יומי דירשו", "עמוד יומי דירשו"),
    CatalogEntry("rambam_yomi", 'רמב"ם יומי', "רמב״ם יומי"),
    CatalogEntry("mishna_yomit", "משנה יומית", "משנה יומית"),
    CatalogEntry("halacha_daily", "הלכה יומית", "הלכה יומית"),
)

# Anchors offered for relative schedule times, with their short labels
ANCHOR_TIMES: Dict[str, str] = {
    "alos_hashachar": "עלות השחר",
    "sunrise_visible": "הנץ החמה",
    "shema_gra": "ק״ש גר״א",
    "chatzot_day": "חצות היום",
    "mincha_gedola": "מנחה גדולה",
    "mincha_ketana": "מנחה קטנה",
    "plag_hamincha": "פלג המנחה",
    "sunset_visible": "שקיעה",
    "tzeit": "צאת הכוכבים",
    "chatzot_night": "חצות הלילה",
}
DEFAULT_ANCHOR = "sunrise_visible"

# Sunday = 0, matching stored valid_on weekday values
WEEKDAY_KEYS: Tuple[str, ...] = (
    "sunday",
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
)
WEEKDAY_NAMES: Tuple[str, ...] = ("ראשון", "שני", "שלישי", "רביעי", "חמישי", "שישי", "שבת")

SPECIAL_DAYS: Dict[str, str] = {
    "rosh_chodesh": "ר״ח",
    "chanukah": "חנוכה",
    "purim": "פורים",
    "pesach": "פסח",
    "shavuot": "שבועות",
    "sukkot": "סוכות",
    "yom_kippur": "יום כיפור",
    "rosh_hashanah": "ר״ה",
    "fast_days": "צומות",
}

PRAYER_TYPES: Dict[str, str] = {
    "shacharit": "שחרית",
    "mincha": "מנחה",
    "arvit": "ערבית",
    "musaf": "מוסף",
    "other": "אחר",
}

NUSACH_OPTIONS: Tuple[str, ...] = ("ספרד", "אשכנז", "ספרדי ירושלמי", "עדות המזרח", "תימני", "חב״ד")
DEFAULT_NUSACH = "ספרד"


def default_selection(entries: Tuple[CatalogEntry, ...]) -> Dict[str, bool]:
    return {entry.key: entry.default_selected for entry in entries}


def merge_selection(entries: Tuple[CatalogEntry, ...], stored: Dict[str, bool] | None) -> Dict[str, bool]:
    """Overlay stored selections on the catalog defaults.

    Stored values win; keys the catalog does not know are kept so that a
    newer admin client never loses data through an older server.
    """
    merged = default_selection(entries)
    for key, value in (stored or {}).items():
        merged[key] = bool(value)
    return merged


def selected_keys(entries: Tuple[CatalogEntry, ...], selection: Dict[str, bool]) -> List[str]:
    """Return selected keys in catalog order, followed by unknown selected keys."""
    known = [entry.key for entry in entries if selection.get(entry.key)]
    catalog_keys = {entry.key for entry in entries}
    extra = [key for key, value in selection.items() if value and key not in catalog_keys]
    return known + extra


def board_labels(entries: Tuple[CatalogEntry, ...]) -> Dict[str, str]:
    return {entry.key: entry.board_label for entry in entries}
