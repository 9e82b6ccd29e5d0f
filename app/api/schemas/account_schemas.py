"""Account API schemas."""

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from app.api.schemas.base import id_str
from app.api.schemas.team_schemas import TeamAccessResponse
from app.application.account_service import AccountOverview
from app.domain.plans import PlanFeatures


class PlanResponse(BaseModel):
    name: str
    cv_limit: int = Field(..., description="-1 means unlimited")
    job_spec_limit: int = Field(..., description="-1 means unlimited")
    team_limit: Optional[int] = None
    data_retention_days: int
    features: List[str] = Field(default_factory=list)

    @classmethod
    def from_plan(cls, plan: PlanFeatures) -> "PlanResponse":
        return cls(
            name=plan.name.value,
            cv_limit=plan.cv_limit,
            job_spec_limit=plan.job_spec_limit,
            team_limit=plan.team_limit,
            data_retention_days=plan.data_retention_days,
            features=sorted(feature.value for feature in plan.features),
        )


class AccountOverviewResponse(BaseModel):
    user_id: str
    email: str
    display_name: Optional[str] = None
    account_plan: str
    created_at: datetime
    workspace: TeamAccessResponse
    plan: PlanResponse
    usage: Dict[str, int] = Field(default_factory=dict)

    @classmethod
    def from_overview(cls, overview: AccountOverview) -> "AccountOverviewResponse":
        account = overview.account
        return cls(
            user_id=id_str(account.id),
            email=account.email,
            display_name=account.display_name,
            account_plan=account.plan.value,
            created_at=account.created_at,
            workspace=TeamAccessResponse.from_workspace(overview.workspace),
            plan=PlanResponse.from_plan(overview.plan),
            usage=dict(overview.usage),
        )


__all__ = ["PlanResponse", "AccountOverviewResponse"]
