from enum import Enum


class OverallResult(str, Enum):
    PASS = "PASS"
    WARN = "WARN"
    FAIL = "FAIL"

    @property
    def code(self) -> int:
        """Integer encoding used by the report views: 1 pass, -1 warn, 0 fail."""
        return {"PASS": 1, "WARN": -1, "FAIL": 0}[self.value]
