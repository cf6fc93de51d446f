"""
FastAPI app assembly: logging, middleware, router wiring and static mounts.
"""
import logging
import os
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

# Configure logging
LOG_LEVEL_NAME = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_LEVEL = getattr(logging, LOG_LEVEL_NAME, logging.INFO)
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)
logger.setLevel(LOG_LEVEL)
logger.info("app_startup: log_level=%s", LOG_LEVEL_NAME)

from kodeshboard.api.constant_info import router as constant_info_router
from kodeshboard.api.display import router as display_router
from kodeshboard.api.layout import router as layout_router
from kodeshboard.api.prayer_times import router as prayer_times_router
from kodeshboard.api.settings import router as settings_router
from kodeshboard.api.support import router as support_router
from kodeshboard.utils.config import get_config

# SQLite is created on first use; other databases are managed by Alembic migrations.

config = get_config()

app = FastAPI(
    title="Kodeshboard Service",
    description="API for managing a synagogue display board: settings, layout, schedule and the kiosk screen.",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(config.cors_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(settings_router)
app.include_router(constant_info_router)
app.include_router(layout_router)
app.include_router(prayer_times_router)
app.include_router(display_router)
app.include_router(support_router)

os.makedirs(config.upload_dir, exist_ok=True)
app.mount(config.upload_url_prefix, StaticFiles(directory=config.upload_dir), name="uploads")
app.mount(
    "/static",
    StaticFiles(directory=str(Path(__file__).resolve().parent.parent / "static")),
    name="static",
)


@app.get("/health")
def health_check():
    return {"status": "ok", "service": config.service_name}


def run():
    """Console entry point: serve the app with uvicorn."""
    import uvicorn

    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8000"))
    logger.info("server_starting: host=%s port=%s", host, port)
    uvicorn.run("kodeshboard.api.main:app", host=host, port=port, log_level=LOG_LEVEL_NAME.lower())
