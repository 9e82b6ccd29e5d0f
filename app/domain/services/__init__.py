"""Domain services package."""

from .cv_filter_service import CVFilterCriteria, CVFilterService, ICVFilterService
from .eea import ComplianceEngine
from .matching_service import AdvancedMatchingService, IMatchingService, MatchResult

__all__ = [
    "IMatchingService",
    "AdvancedMatchingService",
    "MatchResult",
    "ICVFilterService",
    "CVFilterService",
    "CVFilterCriteria",
    "ComplianceEngine",
]
