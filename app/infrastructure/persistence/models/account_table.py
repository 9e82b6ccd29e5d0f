"""SQLModel table for user accounts synced from identity token claims."""

from typing import Optional

from sqlalchemy import Column, String
from sqlmodel import Field

from app.infrastructure.persistence.models.base import IdentifiedModel


class UserAccountTable(IdentifiedModel, table=True):
    """Account row keyed by the identity provider's user id."""

    __tablename__ = "user_accounts"

    email: str = Field(
        sa_column=Column(String(255), nullable=False, unique=True, index=True),
        description="Lower-cased email address"
    )
    display_name: Optional[str] = Field(
        default=None,
        sa_column=Column(String(200), nullable=True),
        description="Name shown to team members"
    )
    plan: str = Field(
        default="free",
        sa_column=Column(String(20), nullable=False, default="free"),
        description="Subscription plan"
    )


__all__ = ["UserAccountTable"]
