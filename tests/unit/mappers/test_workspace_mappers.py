"""Tests for the job spec, team, custom field and EEA mappers."""

from datetime import date
from uuid import uuid4

import pytest

from app.domain.entities.custom_field import CustomFieldDefinition, CustomFieldType
from app.domain.entities.job_spec import LocationType
from app.domain.entities.team import InviteStatus, TeamInvite, TeamMember, TeamRole
from app.domain.services.eea.constants import (
    DisabilityType,
    EconomicSector,
    EmployeeStatus,
    OccupationalLevel,
    Province,
    Race,
)
from app.domain.value_objects import CustomFieldId, TeamMemberId, UserId
from app.infrastructure.persistence.mappers import (
    CompanyMapper,
    CustomFieldMapper,
    EmployeeMapper,
    JobSpecMapper,
    SectorTargetMapper,
    TeamInviteMapper,
    TeamMemberMapper,
)
from app.infrastructure.persistence.models.eea_tables import SectorTargetTable
from tests.fixtures.workspace_fixtures import make_company, make_employee, make_job_spec


@pytest.fixture
def owner_id() -> UserId:
    return UserId(uuid4())


# ========================================================================
# Job specifications
# ========================================================================


class TestJobSpecMapper:

    def test_enum_and_lists_are_stored_as_plain_values(self, owner_id):
        job_spec = make_job_spec(owner_id, location_type=LocationType.REMOTE)

        table = JobSpecMapper.to_table(job_spec)

        assert table.location_type == "remote"
        assert table.required_skills == ["Python", "SQL"]
        assert table.required_skills is not job_spec.required_skills
        assert table.updated_by is None

    def test_restores_job_spec(self, owner_id):
        job_spec = make_job_spec(owner_id)
        job_spec.deactivate(owner_id)

        restored = JobSpecMapper.to_domain(JobSpecMapper.to_table(job_spec))

        assert restored.id == job_spec.id
        assert restored.location_type == LocationType.ONSITE
        assert restored.is_active is False
        assert restored.updated_by == owner_id


# ========================================================================
# Teams
# ========================================================================


class TestTeamMappers:

    def test_member_conversion(self, owner_id):
        member = TeamMember(
            id=TeamMemberId.generate(),
            owner_id=owner_id,
            user_id=UserId(uuid4()),
            email="member@example.com",
            role=TeamRole.ADMIN,
            display_name="Team Member",
        )

        table = TeamMemberMapper.to_table(member)
        restored = TeamMemberMapper.to_domain(table)

        assert table.role == "admin"
        assert restored.role == TeamRole.ADMIN
        assert restored.user_id == member.user_id

    def test_member_update_changes_role(self, owner_id):
        member = TeamMember(id=TeamMemberId.generate(), owner_id=owner_id, user_id=UserId(uuid4()), email="a@b.com")
        table = TeamMemberMapper.to_table(member)
        member.change_role(TeamRole.ADMIN)

        TeamMemberMapper.update_table_from_domain(table, member)

        assert table.role == "admin"

    def test_accepted_invite(self, owner_id):
        invite = TeamInvite.create(owner_id, "New@Example.com", TeamRole.MEMBER, owner_name="Test Owner")
        accepted_by = UserId(uuid4())
        invite.accept(accepted_by)

        restored = TeamInviteMapper.to_domain(TeamInviteMapper.to_table(invite))

        assert restored.email == "new@example.com"
        assert restored.status == InviteStatus.ACCEPTED
        assert restored.accepted_by == accepted_by
        assert restored.owner_name == "Test Owner"

    def test_pending_invite_has_no_acceptor(self, owner_id):
        invite = TeamInvite.create(owner_id, "new@example.com", TeamRole.ADMIN)

        table = TeamInviteMapper.to_table(invite)

        assert table.status == "pending"
        assert table.accepted_by is None
        assert TeamInviteMapper.to_domain(table).accepted_by is None


# ========================================================================
# Custom fields
# ========================================================================


class TestCustomFieldMapper:

    def test_select_field(self, owner_id):
        definition = CustomFieldDefinition(
            id=CustomFieldId.generate(),
            owner_id=owner_id,
            name="notice_period",
            label="Notice Period",
            field_type=CustomFieldType.SELECT,
            options=["Immediate", "30 days"],
            conditional_on="currently_employed",
            order=2,
        )

        table = CustomFieldMapper.to_table(definition)
        restored = CustomFieldMapper.to_domain(table)

        assert table.field_type == "select"
        assert restored.options == ["Immediate", "30 days"]
        assert restored.conditional_on == "currently_employed"
        assert restored.order == 2


# ========================================================================
# Employment equity
# ========================================================================


class TestEEAMappers:

    def test_company_enums_stored_by_value(self, owner_id):
        company = make_company(owner_id, province=Province.WESTERN_CAPE, reporting_period_from=date(2023, 10, 1))

        table = CompanyMapper.to_table(company)
        restored = CompanyMapper.to_domain(table)

        assert table.sector == "FINANCIAL_INSURANCE"
        assert table.province == "WESTERN_CAPE"
        assert restored.sector == EconomicSector.FINANCIAL_INSURANCE
        assert restored.province == Province.WESTERN_CAPE
        assert restored.reporting_period_from == date(2023, 10, 1)

    def test_employee_conversion(self, owner_id):
        company = make_company(owner_id)
        employee = make_employee(
            company.id,
            OccupationalLevel.SEMI_SKILLED,
            Race.INDIAN,
            has_disability=True,
            disability_type=DisabilityType.HEARING,
        )
        employee.terminate(date(2024, 2, 29))

        table = EmployeeMapper.to_table(employee)
        restored = EmployeeMapper.to_domain(table)

        assert (table.race, table.occupational_level, table.status) == ("INDIAN", "SEMI_SKILLED", "TERMINATED")
        assert table.disability_type == "HEARING"
        assert restored.status == EmployeeStatus.TERMINATED
        assert restored.termination_date == date(2024, 2, 29)
        assert restored.disability_type == DisabilityType.HEARING
        assert restored.company_id == company.id

    def test_sector_target_row(self):
        table = SectorTargetTable(
            sector="EDUCATION",
            occupational_level="TOP_MANAGEMENT",
            total_target=0.6,
            male_target=0.3,
            female_target=0.3,
        )

        target = SectorTargetMapper.to_domain(table)

        assert target.sector == EconomicSector.EDUCATION
        assert target.occupational_level == OccupationalLevel.TOP_MANAGEMENT
        assert target.total_target == 0.6
