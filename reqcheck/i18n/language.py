"""
Accept-Language parsing.
"""

from __future__ import annotations

import re

_TAG_RE = re.compile(r"^[\w\-]+$")
_QUALITY_RE = re.compile(r"^q\s*=\s*(\d*(?:\.\d*)?)$", re.IGNORECASE)


def parse_accept_language(header: str | None) -> list[tuple[str, float]]:
    """
    Split an Accept-Language header into (tag, weight) pairs,
    highest weight first.

    A tag without a q-value weighs 1.0 and weights are capped at 1.0.
    Equal weights keep header order. Malformed entries, wildcards and
    q=0 (refused) tags are skipped.
    """
    if not header:
        return []

    languages: list[tuple[str, float]] = []
    for entry in header.split(","):
        tag, _, params = entry.partition(";")
        tag = tag.strip()
        if not tag or not _TAG_RE.match(tag):
            continue

        weight = 1.0
        for param in params.split(";"):
            match = _QUALITY_RE.match(param.strip())
            if match and match.group(1) not in ("", "."):
                weight = min(float(match.group(1)), 1.0)
        if weight == 0:
            # q=0 means "not acceptable"
            continue
        languages.append((tag, weight))

    languages.sort(key=lambda item: item[1], reverse=True)
    return languages


def normalize_tag(tag: str) -> str:
    """en-US -> en_us"""
    return tag.replace("-", "_").lower()


def preferred_language(header: str | None) -> str | None:
    """Return the normalized top-weighted language tag, or None."""
    languages = parse_accept_language(header)
    if not languages:
        return None
    return normalize_tag(languages[0][0])
