"""
FastAPI application factory and API package.

Run with:
    uvicorn reqcheck.api:app --port 8000

Or via main.py:
    python -m reqcheck --serve
"""

from __future__ import annotations

import logging

from fastapi import FastAPI

from reqcheck.config import get_settings
from reqcheck.api.routes import health_router, report_router

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Application factory — create and configure the FastAPI instance."""
    settings = get_settings()

    application = FastAPI(
        title=settings.app_name,
        description=f"Checks whether this server can run {settings.framework_name} applications",
        version="0.1.0",
        docs_url="/docs" if settings.debug else None,
        redoc_url=None,
    )

    application.include_router(health_router, tags=["Health"])
    application.include_router(report_router, tags=["Report"])

    logger.info(f"Created {settings.app_name} API")
    return application


# Module-level instance for `uvicorn reqcheck.api:app`
app = create_app()
