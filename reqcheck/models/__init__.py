from .enums import OverallResult
from .schemas import REMARK_PLACEHOLDER, Report, Requirement

__all__ = ["OverallResult", "REMARK_PLACEHOLDER", "Report", "Requirement"]
