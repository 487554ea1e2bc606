"""
The requirement table: what the framework needs from the runtime.

Each row pairs a probe with the text shown in the report. Rows are
listed in display order; mandatory rows first.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from markupsafe import escape

from reqcheck.checks.probes import (
    AttributeProbe,
    ModuleProbe,
    Probe,
    PythonVersionProbe,
    ServerVariablesProbe,
)
from reqcheck.context import CheckContext
from reqcheck.i18n import MessageKey
from reqcheck.models import Requirement

logger = logging.getLogger(__name__)


@dataclass
class RequirementDefinition:
    name: str
    mandatory: bool
    probe: Probe
    used_by: str = ""  # trusted HTML
    remark: str = ""


def _link(url: str, text: str) -> str:
    return f'<a href="{escape(url)}">{escape(text)}</a>'


def requirement_table(context: CheckContext) -> list[RequirementDefinition]:
    """Build the default requirement rows with text in the run's language."""
    t = context.t
    settings = context.settings
    framework = _link(settings.framework_url, settings.framework_name)
    db_classes = t(MessageKey.ALL_DB_CLASSES, url=escape("https://www.sqlalchemy.org/"))

    return [
        # ── Mandatory ────────────────────────────────────
        RequirementDefinition(
            t(MessageKey.PYTHON_VERSION), True, PythonVersionProbe(), framework,
            t(MessageKey.PYTHON_VERSION_REQUIRED, version=settings.min_python_version),
        ),
        RequirementDefinition(
            t(MessageKey.SERVER_VARIABLES), True, ServerVariablesProbe(), framework,
        ),
        RequirementDefinition(
            t(MessageKey.REFLECTION), True, AttributeProbe("inspect", "signature"), framework,
        ),
        RequirementDefinition(
            t(MessageKey.REGEX), True, ModuleProbe("re"), framework,
        ),
        RequirementDefinition(
            t(MessageKey.COLLECTIONS), True, AttributeProbe("collections.abc", "Mapping"), framework,
        ),
        # ── Optional ─────────────────────────────────────
        RequirementDefinition(
            t(MessageKey.XML_DOM), False, AttributeProbe("xml.dom.minidom", "Document"),
            _link("https://docs.python.org/3/library/xml.dom.minidom.html", "XML responses"),
        ),
        RequirementDefinition(
            t(MessageKey.DB_TOOLKIT), False, ModuleProbe("sqlalchemy"), db_classes,
        ),
        RequirementDefinition(
            t(MessageKey.SQLITE), False, ModuleProbe("sqlite3"), db_classes,
            t(MessageKey.SQLITE_REMARK),
        ),
        RequirementDefinition(
            t(MessageKey.MYSQL), False, ModuleProbe("pymysql"), db_classes,
            t(MessageKey.MYSQL_REMARK),
        ),
        RequirementDefinition(
            t(MessageKey.POSTGRESQL), False, ModuleProbe("psycopg2"), db_classes,
            t(MessageKey.POSTGRESQL_REMARK),
        ),
        RequirementDefinition(
            t(MessageKey.MEMCACHED), False, ModuleProbe("pymemcache"),
            _link("https://pymemcache.readthedocs.io/", "Memcached cache backend"),
        ),
        RequirementDefinition(
            t(MessageKey.REDIS), False, ModuleProbe("redis"),
            _link("https://redis-py.readthedocs.io/", "Redis cache backend"),
        ),
        RequirementDefinition(
            t(MessageKey.CRYPTOGRAPHY), False, ModuleProbe("cryptography"),
            _link("https://cryptography.io/", "Security helpers"),
            t(MessageKey.CRYPTOGRAPHY_REMARK),
        ),
        RequirementDefinition(
            t(MessageKey.SOAP), False, ModuleProbe("zeep"),
            _link("https://docs.python-zeep.org/", "Web service clients"),
        ),
        RequirementDefinition(
            t(MessageKey.IMAGING), False, ModuleProbe("PIL"),
            _link("https://pillow.readthedocs.io/", "CAPTCHA images"),
        ),
    ]


def collect(
    context: CheckContext,
    definitions: list[RequirementDefinition] | None = None,
) -> list[Requirement]:
    """Run every probe and return one Requirement per row, in order."""
    if definitions is None:
        definitions = requirement_table(context)

    requirements: list[Requirement] = []
    for definition in definitions:
        outcome = definition.probe.run(context)
        requirements.append(Requirement(
            name=definition.name,
            mandatory=definition.mandatory,
            satisfied=outcome.satisfied,
            used_by=definition.used_by,
            remark=outcome.detail or definition.remark,
        ))

    logger.info(
        f"Collected {len(requirements)} requirements, "
        f"{sum(not r.satisfied for r in requirements)} unmet"
    )
    return requirements
