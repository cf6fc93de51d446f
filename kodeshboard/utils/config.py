"""Runtime configuration sourced from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Tuple


_DEFAULT_CORS_ORIGINS = (
    "http://localhost",
    "http://localhost:3000",
    "http://localhost:8000",
)


@dataclass(frozen=True)
class AppConfig:
    service_name: str
    version: str
    build_sha: str | None
    upload_dir: str
    upload_url_prefix: str
    max_upload_bytes: int
    display_refresh_seconds: int
    board_timezone: str
    cors_origins: Tuple[str, ...]
    show_all_events: bool


def _normalize_bool(value: str | None, default: bool = False) -> bool:
    """Return normalized boolean from environment-style value."""
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"", "0", "false", "no", "off"}:
        return False
    if normalized in {"1", "true", "yes", "on"}:
        return True
    return default


def _int_env(name: str, default: int, minimum: int = 0) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value >= minimum else default


def _split_origins(raw: str | None) -> Tuple[str, ...]:
    if not raw:
        return _DEFAULT_CORS_ORIGINS
    return tuple(origin.strip() for origin in raw.split(",") if origin.strip())


@lru_cache(maxsize=None)
def get_config() -> AppConfig:
    """Return the cached configuration sourced from the environment."""
    prefix = os.getenv("UPLOAD_URL_PREFIX", "/uploads").strip() or "/uploads"
    if not prefix.startswith("/"):
        prefix = "/" + prefix
    return AppConfig(
        service_name=os.getenv("SERVICE_NAME", "kodeshboard-service"),
        version=os.getenv("VERSION", "unknown"),
        build_sha=os.getenv("BUILD_SHA") or None,
        upload_dir=os.getenv("UPLOAD_DIR", "uploads"),
        upload_url_prefix=prefix.rstrip("/"),
        max_upload_bytes=_int_env("MAX_UPLOAD_BYTES", 5 * 1024 * 1024, minimum=1),
        display_refresh_seconds=_int_env("DISPLAY_REFRESH_SECONDS", 300, minimum=10),
        board_timezone=os.getenv("BOARD_TIMEZONE", "Asia/Jerusalem"),
        cors_origins=_split_origins(os.getenv("CORS_ORIGINS")),
        show_all_events=_normalize_bool(os.getenv("DISPLAY_SHOW_ALL_EVENTS"), default=False),
    )


def refresh_config_cache() -> None:
    """Invalidate cached configuration (useful for tests)."""
    get_config.cache_clear()
