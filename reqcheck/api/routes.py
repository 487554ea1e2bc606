"""
API routes — thin HTTP layer over the checker.

Routes:
  GET  /health           → API health check
  GET  /                 → HTML requirement report
  GET  /api/requirements → Same report as JSON
"""

from __future__ import annotations

import logging
import os
import sys
from datetime import datetime, timezone

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import HTMLResponse

from reqcheck.checks import server_vars_from_scope
from reqcheck.config import get_settings
from reqcheck.context import CheckContext, build_context
from reqcheck.models import Report
from reqcheck.report import build_report, render_report

logger = logging.getLogger(__name__)

# ── Routers ──────────────────────────────────────────────
health_router = APIRouter()
report_router = APIRouter()


def serving_script() -> str:
    """File of the package uvicorn loads the app from."""
    return os.path.abspath(sys.modules[__package__].__file__)


def _context_for(request: Request) -> CheckContext:
    settings = get_settings()
    server_vars = server_vars_from_scope(request.scope, settings)
    return build_context(server_vars, serving_script(), settings)


# ── Health ───────────────────────────────────────────────

@health_router.get("/health")
async def health_check():
    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


# ── Report ───────────────────────────────────────────────

@report_router.get("/", response_class=HTMLResponse)
def report_page(request: Request):
    """Run every check and render the HTML report."""
    context = _context_for(request)
    try:
        report = build_report(context)
        html = render_report(context, report.requirements, report.result)
    except Exception as e:
        logger.error(f"Rendering the requirement report failed: {e}")
        raise HTTPException(status_code=500, detail=f"Report rendering failed: {e}")
    return HTMLResponse(content=html)


@report_router.get("/api/requirements", response_model=Report)
def report_json(request: Request):
    """Run every check and return the evaluated rows as JSON."""
    context = _context_for(request)
    return build_report(context)
