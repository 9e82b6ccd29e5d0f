"""Subscription plan catalogue and feature gating rules."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Optional

from app.domain.exceptions import PlanFeatureUnavailableError


UNLIMITED = -1


class PlanName(str, Enum):
    """Subscription tiers in ascending order."""

    FREE = "free"
    STARTER = "starter"
    BASIC = "basic"
    PROFESSIONAL = "professional"
    BUSINESS = "business"
    ENTERPRISE = "enterprise"


class PlanFeature(str, Enum):
    """Features that can be switched on per plan."""

    ADVANCED_FILTERING = "advanced_filtering"
    BULK_UPLOAD = "bulk_upload"
    TEAM_COLLABORATION = "team_collaboration"
    CUSTOM_FIELDS = "custom_fields"
    ACTIVITY_LOGS = "activity_logs"
    EEA_COMPLIANCE = "eea_compliance"
    EXPORT_CSV = "export_csv"


@dataclass(frozen=True)
class PlanFeatures:
    """Limits and feature flags attached to a plan."""

    name: PlanName
    cv_limit: int
    job_spec_limit: int
    team_limit: Optional[int]
    data_retention_days: int
    features: FrozenSet[PlanFeature]

    def has(self, feature: PlanFeature) -> bool:
        return feature in self.features


_BASE = frozenset({PlanFeature.EXPORT_CSV})
_STARTER = _BASE | {PlanFeature.BULK_UPLOAD}
_BASIC = _STARTER | {PlanFeature.ADVANCED_FILTERING}
_PROFESSIONAL = _BASIC | {
    PlanFeature.TEAM_COLLABORATION,
    PlanFeature.CUSTOM_FIELDS,
    PlanFeature.ACTIVITY_LOGS,
    PlanFeature.EEA_COMPLIANCE,
}

PLAN_CATALOGUE = {
    PlanName.FREE: PlanFeatures(PlanName.FREE, 10, 1, None, 7, _BASE),
    PlanName.STARTER: PlanFeatures(PlanName.STARTER, 50, 3, None, 30, _STARTER),
    PlanName.BASIC: PlanFeatures(PlanName.BASIC, 150, 10, None, 90, _BASIC),
    PlanName.PROFESSIONAL: PlanFeatures(PlanName.PROFESSIONAL, 600, 30, 3, 365, _PROFESSIONAL),
    PlanName.BUSINESS: PlanFeatures(PlanName.BUSINESS, 1500, 100, 10, 365, _PROFESSIONAL),
    PlanName.ENTERPRISE: PlanFeatures(PlanName.ENTERPRISE, UNLIMITED, UNLIMITED, 999, 365, _PROFESSIONAL),
}


def resolve_plan(plan: Optional[str]) -> PlanName:
    """Map a stored plan string to a known plan, falling back to free."""
    if isinstance(plan, PlanName):
        return plan
    try:
        return PlanName((plan or "").strip().lower())
    except ValueError:
        return PlanName.FREE


def get_plan_features(plan: Optional[str]) -> PlanFeatures:
    return PLAN_CATALOGUE[resolve_plan(plan)]


def has_feature_access(plan: Optional[str], feature: PlanFeature) -> bool:
    return get_plan_features(plan).has(feature)


def require_feature(plan: Optional[str], feature: PlanFeature) -> None:
    """Raise when the plan does not grant ``feature``."""
    if not has_feature_access(plan, feature):
        raise PlanFeatureUnavailableError(feature.value, resolve_plan(plan).value)


def get_cv_limit(plan: Optional[str]) -> int:
    return get_plan_features(plan).cv_limit


def get_job_spec_limit(plan: Optional[str]) -> int:
    return get_plan_features(plan).job_spec_limit


def get_team_limit(plan: Optional[str]) -> Optional[int]:
    return get_plan_features(plan).team_limit


def is_unlimited(limit: Optional[int]) -> bool:
    return limit == UNLIMITED


def within_limit(limit: int, current_count: int) -> bool:
    """Return True when one more item fits under ``limit``."""
    return is_unlimited(limit) or current_count < limit


__all__ = [
    "UNLIMITED",
    "PlanName",
    "PlanFeature",
    "PlanFeatures",
    "PLAN_CATALOGUE",
    "resolve_plan",
    "get_plan_features",
    "has_feature_access",
    "require_feature",
    "get_cv_limit",
    "get_job_spec_limit",
    "get_team_limit",
    "is_unlimited",
    "within_limit",
]
