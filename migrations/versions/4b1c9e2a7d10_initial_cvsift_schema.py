"""initial cvsift schema

Revision ID: 4b1c9e2a7d10
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "4b1c9e2a7d10"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps():
    return [
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
    ]


def _audit_columns():
    return [
        sa.Column("is_deleted", sa.Boolean(), nullable=False),
        sa.Column("deleted_at", sa.DateTime(), nullable=True),
        sa.Column("created_by", sa.Uuid(), nullable=True),
        sa.Column("updated_by", sa.Uuid(), nullable=True),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "user_accounts",
        *_timestamps(),
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("display_name", sa.String(length=200), nullable=True),
        sa.Column("plan", sa.String(length=20), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_user_accounts_email", "user_accounts", ["email"], unique=True)

    op.create_table(
        "cvs",
        *_timestamps(),
        sa.Column("id", sa.Uuid(), nullable=False),
        *_audit_columns(),
        sa.Column("owner_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("file_name", sa.String(length=255), nullable=False),
        sa.Column("file_type", sa.String(length=100), nullable=False),
        sa.Column("file_size", sa.Integer(), nullable=False),
        sa.Column("storage_path", sa.String(length=500), nullable=False),
        sa.Column("status", sa.String(length=20), nullable=False),
        sa.Column("parsed", sa.Boolean(), nullable=False),
        sa.Column("metadata", postgresql.JSONB(astext_type=sa.Text()), nullable=False),
        sa.Column("custom_fields", postgresql.JSONB(astext_type=sa.Text()), nullable=False),
        sa.Column("match_results", postgresql.JSONB(astext_type=sa.Text()), nullable=False),
        sa.Column("processing_error", sa.Text(), nullable=True),
        sa.Column("view_count", sa.Integer(), nullable=False),
        sa.Column("last_viewed_at", sa.DateTime(), nullable=True),
        sa.Column("uploaded_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_cvs_owner_id", "cvs", ["owner_id"], unique=False)
    op.create_index("idx_cvs_owner_uploaded", "cvs", ["owner_id", "uploaded_at"], unique=False)
    op.create_index("idx_cvs_owner_status", "cvs", ["owner_id", "status"], unique=False)

    op.create_table(
        "job_specs",
        *_timestamps(),
        sa.Column("id", sa.Uuid(), nullable=False),
        *_audit_columns(),
        sa.Column("owner_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("location", sa.String(length=200), nullable=True),
        sa.Column("location_type", sa.String(length=20), nullable=False),
        sa.Column("department", sa.String(length=200), nullable=True),
        sa.Column("industry", sa.String(length=200), nullable=True),
        sa.Column("min_experience", sa.Integer(), nullable=True),
        sa.Column("max_experience", sa.Integer(), nullable=True),
        sa.Column("required_skills", postgresql.ARRAY(sa.String()), nullable=False),
        sa.Column("preferred_skills", postgresql.ARRAY(sa.String()), nullable=False),
        sa.Column("education", sa.String(length=200), nullable=True),
        sa.Column("gender", sa.String(length=20), nullable=True),
        sa.Column("race", sa.String(length=50), nullable=True),
        sa.Column("min_age", sa.Integer(), nullable=True),
        sa.Column("max_age", sa.Integer(), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_job_specs_owner_id", "job_specs", ["owner_id"], unique=False)
    op.create_index("ix_job_specs_is_active", "job_specs", ["is_active"], unique=False)
    op.create_index("idx_job_specs_owner_created", "job_specs", ["owner_id", "created_at"], unique=False)

    op.create_table(
        "custom_fields",
        *_timestamps(),
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("owner_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("label", sa.String(length=200), nullable=False),
        sa.Column("field_type", sa.String(length=20), nullable=False),
        sa.Column("required", sa.Boolean(), nullable=False),
        sa.Column("options", postgresql.ARRAY(sa.String()), nullable=False),
        sa.Column("conditional_on", sa.String(length=100), nullable=True),
        sa.Column("conditional_value", sa.String(length=200), nullable=True),
        sa.Column("display_order", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("owner_id", "name", name="uq_custom_fields_owner_name"),
    )
    op.create_index("ix_custom_fields_owner_id", "custom_fields", ["owner_id"], unique=False)

    op.create_table(
        "team_members",
        *_timestamps(),
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("owner_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("user_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("role", sa.String(length=20), nullable=False),
        sa.Column("display_name", sa.String(length=200), nullable=True),
        sa.Column("joined_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", name="uq_team_members_user"),
    )
    op.create_index("ix_team_members_owner_id", "team_members", ["owner_id"], unique=False)
    op.create_index("idx_team_members_owner_email", "team_members", ["owner_id", "email"], unique=False)

    op.create_table(
        "team_invites",
        *_timestamps(),
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("owner_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("role", sa.String(length=20), nullable=False),
        sa.Column("invited_by", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("owner_name", sa.String(length=200), nullable=True),
        sa.Column("status", sa.String(length=20), nullable=False),
        sa.Column("expires_at", sa.DateTime(), nullable=False),
        sa.Column("accepted_at", sa.DateTime(), nullable=True),
        sa.Column("accepted_by", postgresql.UUID(as_uuid=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_team_invites_owner_id", "team_invites", ["owner_id"], unique=False)
    op.create_index("idx_team_invites_owner_status", "team_invites", ["owner_id", "status"], unique=False)
    op.create_index("idx_team_invites_email", "team_invites", ["email"], unique=False)

    op.create_table(
        "activity_logs",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("owner_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("user_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("user_email", sa.String(length=255), nullable=True),
        sa.Column("user_name", sa.String(length=200), nullable=True),
        sa.Column("action", sa.String(length=50), nullable=False),
        sa.Column("resource_type", sa.String(length=30), nullable=False),
        sa.Column("resource_id", sa.String(length=100), nullable=True),
        sa.Column("resource_name", sa.String(length=255), nullable=True),
        sa.Column("role", sa.String(length=20), nullable=False),
        sa.Column("is_team_member_action", sa.Boolean(), nullable=False),
        sa.Column("metadata", postgresql.JSONB(astext_type=sa.Text()), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_activity_logs_owner_id", "activity_logs", ["owner_id"], unique=False)
    op.create_index("idx_activity_logs_owner_created", "activity_logs", ["owner_id", "created_at"], unique=False)

    op.create_table(
        "eea_companies",
        *_timestamps(),
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("owner_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("sector", sa.String(length=60), nullable=False),
        sa.Column("dti_registration_name", sa.String(length=255), nullable=True),
        sa.Column("dti_registration_number", sa.String(length=100), nullable=True),
        sa.Column("paye_sars_number", sa.String(length=100), nullable=True),
        sa.Column("uif_reference_number", sa.String(length=100), nullable=True),
        sa.Column("ee_reference_number", sa.String(length=100), nullable=True),
        sa.Column("eap_type", sa.String(length=20), nullable=False),
        sa.Column("province", sa.String(length=30), nullable=True),
        sa.Column("reporting_period_from", sa.Date(), nullable=True),
        sa.Column("reporting_period_to", sa.Date(), nullable=True),
        sa.Column("plan_duration_from", sa.Date(), nullable=True),
        sa.Column("plan_duration_to", sa.Date(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_eea_companies_owner_id", "eea_companies", ["owner_id"], unique=True)

    op.create_table(
        "eea_employees",
        *_timestamps(),
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("company_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("employee_number", sa.String(length=50), nullable=False),
        sa.Column("first_name", sa.String(length=100), nullable=False),
        sa.Column("last_name", sa.String(length=100), nullable=False),
        sa.Column("initials", sa.String(length=20), nullable=True),
        sa.Column("gender", sa.String(length=10), nullable=False),
        sa.Column("race", sa.String(length=20), nullable=False),
        sa.Column("nationality", sa.String(length=100), nullable=False),
        sa.Column("is_foreign_national", sa.Boolean(), nullable=False),
        sa.Column("id_number", sa.String(length=20), nullable=True),
        sa.Column("passport_number", sa.String(length=50), nullable=True),
        sa.Column("has_disability", sa.Boolean(), nullable=False),
        sa.Column("disability_type", sa.String(length=30), nullable=True),
        sa.Column("employment_date", sa.Date(), nullable=True),
        sa.Column("position", sa.String(length=200), nullable=True),
        sa.Column("occupational_level", sa.String(length=60), nullable=False),
        sa.Column("annual_fixed_income", sa.Float(), nullable=False),
        sa.Column("annual_variable_income", sa.Float(), nullable=True),
        sa.Column("status", sa.String(length=20), nullable=False),
        sa.Column("termination_date", sa.Date(), nullable=True),
        sa.ForeignKeyConstraint(["company_id"], ["eea_companies.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("company_id", "employee_number", name="uq_eea_employees_number"),
    )
    op.create_index("ix_eea_employees_company_id", "eea_employees", ["company_id"], unique=False)
    op.create_index(
        "idx_eea_employees_company_level",
        "eea_employees",
        ["company_id", "occupational_level"],
        unique=False,
    )

    op.create_table(
        "eea_sector_targets",
        *_timestamps(),
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("sector", sa.String(length=60), nullable=False),
        sa.Column("occupational_level", sa.String(length=60), nullable=False),
        sa.Column("total_target", sa.Float(), nullable=False),
        sa.Column("male_target", sa.Float(), nullable=True),
        sa.Column("female_target", sa.Float(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("sector", "occupational_level", name="uq_eea_sector_targets"),
    )
    op.create_index("ix_eea_sector_targets_sector", "eea_sector_targets", ["sector"], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("ix_eea_sector_targets_sector", table_name="eea_sector_targets")
    op.drop_table("eea_sector_targets")

    op.drop_index("idx_eea_employees_company_level", table_name="eea_employees")
    op.drop_index("ix_eea_employees_company_id", table_name="eea_employees")
    op.drop_table("eea_employees")

    op.drop_index("ix_eea_companies_owner_id", table_name="eea_companies")
    op.drop_table("eea_companies")

    op.drop_index("idx_activity_logs_owner_created", table_name="activity_logs")
    op.drop_index("ix_activity_logs_owner_id", table_name="activity_logs")
    op.drop_table("activity_logs")

    op.drop_index("idx_team_invites_email", table_name="team_invites")
    op.drop_index("idx_team_invites_owner_status", table_name="team_invites")
    op.drop_index("ix_team_invites_owner_id", table_name="team_invites")
    op.drop_table("team_invites")

    op.drop_index("idx_team_members_owner_email", table_name="team_members")
    op.drop_index("ix_team_members_owner_id", table_name="team_members")
    op.drop_table("team_members")

    op.drop_index("ix_custom_fields_owner_id", table_name="custom_fields")
    op.drop_table("custom_fields")

    op.drop_index("idx_job_specs_owner_created", table_name="job_specs")
    op.drop_index("ix_job_specs_is_active", table_name="job_specs")
    op.drop_index("ix_job_specs_owner_id", table_name="job_specs")
    op.drop_table("job_specs")

    op.drop_index("idx_cvs_owner_status", table_name="cvs")
    op.drop_index("idx_cvs_owner_uploaded", table_name="cvs")
    op.drop_index("ix_cvs_owner_id", table_name="cvs")
    op.drop_table("cvs")

    op.drop_index("ix_user_accounts_email", table_name="user_accounts")
    op.drop_table("user_accounts")
