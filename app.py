"""
App assembly entry point.

Re-exports the FastAPI `app` from `kodeshboard.api.main` so deployments can
point uvicorn at `app:app`.
"""

from kodeshboard.api.main import app  # noqa: F401
