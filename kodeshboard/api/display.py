"""
Kiosk display endpoints.

`/display/data` returns the board view model; `/display` renders the same
model as the full-screen RTL page the synagogue screen loads.
"""
import logging
from pathlib import Path

from fastapi import APIRouter, Depends
from jinja2 import Environment, FileSystemLoader, select_autoescape
from sqlalchemy.orm import Session
from starlette.responses import HTMLResponse

from kodeshboard.db import schemas
from kodeshboard.db.database import get_db
from kodeshboard.services.board_service import build_board

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/display", tags=["display"])

TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
UNCONFIGURED_PLACEHOLDER = "לחץ כאן להגדרת האזור"

template_env = Environment(
    loader=FileSystemLoader(str(TEMPLATE_DIR)),
    autoescape=select_autoescape(["html"]),
)


def render_board(board: schemas.BoardView) -> str:
    template = template_env.get_template("display.html")
    zones = {zone.zone_id: zone for zone in board.zones}
    return template.render(board=board, zones=zones, placeholder=UNCONFIGURED_PLACEHOLDER)


@router.get("/data", response_model=schemas.BoardView)
def get_display_data(db: Session = Depends(get_db)):
    return build_board(db)


@router.get("", response_class=HTMLResponse)
def get_display_page(db: Session = Depends(get_db)):
    board = build_board(db)
    logger.debug("display_rendered: template=%s", board.template_id)
    return HTMLResponse(render_board(board))
