"""
Picks the view for the run's language and renders the report into it.
"""

from __future__ import annotations

import logging
from datetime import datetime
from importlib import metadata
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import escape

from reqcheck.checks import collect, evaluate
from reqcheck.context import CheckContext
from reqcheck.i18n import MessageKey
from reqcheck.models import OverallResult, Report, Requirement

logger = logging.getLogger(__name__)

DEFAULT_VIEW = "index.html"


def select_view(views_dir: str | Path, lang: str | None) -> str:
    """Return the template name for `lang`, or the default view."""
    if lang:
        localized = f"{lang}/{DEFAULT_VIEW}"
        if (Path(views_dir) / localized).is_file():
            return localized
        logger.debug(f"No view for '{lang}', using {DEFAULT_VIEW}")
    return DEFAULT_VIEW


def framework_version(package: str) -> str:
    """Installed version of the framework distribution, or "" if absent."""
    try:
        return metadata.version(package)
    except metadata.PackageNotFoundError:
        return ""


def server_info(context: CheckContext, now: datetime | None = None) -> str:
    """One line: server software, framework link/version, timestamp (HTML)."""
    settings = context.settings
    now = now or datetime.now()
    info = [
        str(escape(context.server_vars.get("SERVER_SOFTWARE", ""))),
        f'<a href="{escape(settings.framework_url)}">{escape(settings.framework_name)}</a>/'
        f"{escape(framework_version(settings.framework_package))}",
        now.strftime("%Y-%m-%d %H:%M"),
    ]
    return " ".join(info)


def _environment(views_dir: str | Path) -> Environment:
    return Environment(
        loader=FileSystemLoader(str(views_dir)),
        autoescape=select_autoescape(["html"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )


def render_report(
    context: CheckContext,
    requirements: list[Requirement],
    result: OverallResult,
) -> str:
    """Render the HTML report for already evaluated requirements."""
    views_dir = context.settings.views_dir
    view = select_view(views_dir, context.language)
    template = _environment(views_dir).get_template(view)

    logger.info(f"Rendering {view} ({len(requirements)} rows, {result.value})")
    return template.render(
        requirements=requirements,
        result=result,
        server_info=server_info(context),
        framework=context.settings.framework_name,
        language=context.language or "en",
        t=context.t,
        MessageKey=MessageKey,
        OverallResult=OverallResult,
    )


def build_report(context: CheckContext) -> Report:
    """Collect and evaluate every requirement for this run."""
    rows, result = evaluate(collect(context))
    return Report(
        requirements=rows,
        result=result,
        server_info=server_info(context),
        language=context.language,
    )


def render_html(context: CheckContext) -> str:
    """Full pipeline: probes → evaluation → HTML."""
    report = build_report(context)
    return render_report(context, report.requirements, report.result)
