"""
Data schemas for a single checker run.
"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field, computed_field

from .enums import OverallResult

# Shown in place of an empty remark so the table cell is not collapsed
REMARK_PLACEHOLDER = "\u00a0"


class Requirement(BaseModel):
    """One evaluated row of the requirement table."""
    name: str
    mandatory: bool
    satisfied: bool
    used_by: str = ""  # trusted HTML snippet (links to the components needing it)
    remark: str = ""


class Report(BaseModel):
    """Full outcome of a checker run, as served by the JSON endpoint."""
    requirements: list[Requirement] = []
    result: OverallResult = OverallResult.PASS
    server_info: str = ""
    language: str | None = None
    generated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @computed_field
    @property
    def result_code(self) -> int:
        return self.result.code
