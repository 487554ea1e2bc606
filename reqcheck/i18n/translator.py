"""
Message table loading and lookup.

The table for the preferred language is read once per run and carried by
the Translator held in the run's CheckContext.
"""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any

from .catalog import SOURCE_MESSAGES, MessageKey

logger = logging.getLogger(__name__)

MESSAGE_FILE = "messages.json"

_PLACEHOLDER_RE = re.compile(r"\{(\w+)\}")


def load_messages(messages_dir: str | Path, lang: str | None) -> dict[MessageKey, str]:
    """
    Load the message table for `lang`.
    Returns an empty table if there is no language, no file, or the file
    cannot be used; the caller then shows source strings.
    """
    if not lang:
        return {}

    path = Path(messages_dir) / lang / MESSAGE_FILE
    if not path.is_file():
        logger.debug(f"No message table for '{lang}' at {path}")
        return {}

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.warning(f"Ignoring unreadable message table {path}: {e}")
        return {}

    if not isinstance(raw, dict):
        logger.warning(f"Ignoring message table {path}: expected a JSON object")
        return {}

    known = {key.value: key for key in MessageKey}
    messages: dict[MessageKey, str] = {}
    for name, text in raw.items():
        key = known.get(name)
        if key is None or not isinstance(text, str):
            logger.debug(f"Skipping unknown message '{name}' in {path}")
            continue
        messages[key] = text

    logger.info(f"Loaded {len(messages)} messages for '{lang}'")
    return messages


def substitute(message: str, params: dict[str, Any]) -> str:
    """Replace {name} placeholders; unknown placeholders are left as they are."""
    if not params:
        return message
    return _PLACEHOLDER_RE.sub(
        lambda m: str(params[m.group(1)]) if m.group(1) in params else m.group(0),
        message,
    )


class Translator:
    """Looks messages up in a loaded table, falling back to the source text."""

    def __init__(self, messages: dict[MessageKey, str] | None = None, language: str | None = None):
        self.messages = messages or {}
        self.language = language

    @classmethod
    def load(cls, messages_dir: str | Path, lang: str | None) -> "Translator":
        return cls(load_messages(messages_dir, lang), lang)

    def t(self, key: MessageKey, **params: Any) -> str:
        message = self.messages.get(key) or SOURCE_MESSAGES[key]
        return substitute(message, params)

    def text(self, value: "MessageKey | str", **params: Any) -> str:
        """Translate catalog keys; pass literal strings through untranslated."""
        if isinstance(value, MessageKey):
            return self.t(value, **params)
        return substitute(value, params)
