"""
Reduces evaluated requirement rows to a single OverallResult.
"""

from __future__ import annotations

import logging
from typing import Iterable

from reqcheck.models import REMARK_PLACEHOLDER, OverallResult, Requirement

logger = logging.getLogger(__name__)


def fold_result(requirements: Iterable[Requirement]) -> OverallResult:
    """
    Any unmet mandatory requirement → FAIL.
    Otherwise any unmet optional requirement → WARN.
    Otherwise PASS.
    """
    result = OverallResult.PASS
    for requirement in requirements:
        if requirement.satisfied:
            continue
        if requirement.mandatory:
            result = OverallResult.FAIL
        elif result is OverallResult.PASS:
            result = OverallResult.WARN
    return result


def evaluate(requirements: list[Requirement]) -> tuple[list[Requirement], OverallResult]:
    """Normalize empty remarks and compute the overall result over every row."""
    rows = [
        r.model_copy(update={"remark": REMARK_PLACEHOLDER}) if r.remark == "" else r
        for r in requirements
    ]
    result = fold_result(rows)
    logger.info(f"Overall result: {result.value}")
    return rows, result
