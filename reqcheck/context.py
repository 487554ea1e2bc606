"""
Per-run context: everything a checker run reads from its surroundings.

Built once per request (or CGI invocation) and passed explicitly to the
probes, the evaluator and the renderer.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Mapping

from reqcheck.config import Settings, get_settings
from reqcheck.i18n import Translator, preferred_language

logger = logging.getLogger(__name__)


@dataclass
class CheckContext:
    settings: Settings
    server_vars: Mapping[str, str] = field(default_factory=dict)
    entry_script: str = ""
    language: str | None = None
    translator: Translator = field(default_factory=Translator)

    def t(self, key, **params) -> str:
        return self.translator.text(key, **params)


def build_context(
    server_vars: Mapping[str, str],
    entry_script: str | None = None,
    settings: Settings | None = None,
) -> CheckContext:
    """Resolve the preferred language and load its message table."""
    settings = settings or get_settings()
    language = preferred_language(server_vars.get("HTTP_ACCEPT_LANGUAGE"))
    translator = Translator.load(settings.messages_dir, language)

    logger.debug(f"Check context: language={language!r}, {len(server_vars)} server vars")
    return CheckContext(
        settings=settings,
        server_vars=server_vars,
        entry_script=entry_script or settings.entry_script,
        language=language,
        translator=translator,
    )
