"""User accounts known to the service, keyed by the identity provider's subject."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from app.domain.plans import PlanName, resolve_plan
from app.domain.value_objects import UserId


@dataclass
class UserAccount:
    id: UserId
    email: str
    display_name: Optional[str] = None
    plan: PlanName = PlanName.FREE
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self):
        self.email = (self.email or "").strip().lower()
        self.plan = resolve_plan(self.plan)

    def sync_profile(self, email: str, display_name: Optional[str], plan: Optional[str]) -> bool:
        """Refresh claims from the latest token; returns True when anything changed."""
        new_email = (email or self.email).strip().lower()
        new_name = display_name or self.display_name
        new_plan = resolve_plan(plan) if plan else self.plan
        changed = (new_email, new_name, new_plan) != (self.email, self.display_name, self.plan)
        if changed:
            self.email = new_email
            self.display_name = new_name
            self.plan = new_plan
            self.updated_at = datetime.utcnow()
        return changed


__all__ = ["UserAccount"]
