"""Localization — language negotiation, message catalog and lookup."""

from reqcheck.i18n.catalog import SOURCE_MESSAGES, MessageKey
from reqcheck.i18n.language import normalize_tag, parse_accept_language, preferred_language
from reqcheck.i18n.translator import Translator, load_messages, substitute

__all__ = [
    "MessageKey",
    "SOURCE_MESSAGES",
    "Translator",
    "load_messages",
    "normalize_tag",
    "parse_accept_language",
    "preferred_language",
    "substitute",
]
