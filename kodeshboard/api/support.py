"""
Build information endpoint.
"""
from __future__ import annotations

import os

from fastapi import APIRouter

from kodeshboard.utils.config import get_config

router = APIRouter(tags=["support"])


@router.get("/build-info")
def get_build_info():
    """Return build and deployment information for the running service."""
    config = get_config()
    return {
        "build_sha": config.build_sha,
        "build_timestamp": os.getenv("BUILD_TIMESTAMP") or None,
        "image_tag": os.getenv("IMAGE_TAG") or None,
        "service_name": config.service_name,
        "version": config.version,
    }
