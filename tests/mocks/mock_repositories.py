"""
Mock repository implementations for testing.

These mocks implement the repository interfaces and maintain
test data in memory while tracking method calls for verification.
"""

from typing import Dict, List, Optional, Tuple

from app.domain.entities.account import UserAccount
from app.domain.entities.activity_log import ActivityLogEntry
from app.domain.entities.custom_field import CustomFieldDefinition
from app.domain.entities.cv import CV, CVStatus
from app.domain.entities.employment_equity import Company, Employee, SectorTarget
from app.domain.entities.job_spec import JobSpec
from app.domain.entities.team import InviteStatus, TeamInvite, TeamMember
from app.domain.repositories.account_repository import IUserAccountRepository
from app.domain.repositories.activity_log_repository import IActivityLogRepository
from app.domain.repositories.custom_field_repository import ICustomFieldRepository
from app.domain.repositories.cv_repository import ICVRepository
from app.domain.repositories.eea_repository import (
    ICompanyRepository,
    IEmployeeRepository,
    ISectorTargetRepository,
)
from app.domain.repositories.job_spec_repository import IJobSpecRepository
from app.domain.repositories.team_repository import ITeamInviteRepository, ITeamMemberRepository


class MockUserAccountRepository(IUserAccountRepository):
    """Mock account repository for testing."""

    def __init__(self):
        self.accounts: Dict[str, UserAccount] = {}
        self.call_log: List[tuple] = []

    async def get_by_id(self, user_id):
        self.call_log.append(("get_by_id", str(user_id)))
        return self.accounts.get(str(user_id))

    async def get_by_email(self, email):
        self.call_log.append(("get_by_email", email))
        wanted = (email or "").strip().lower()
        return next((a for a in self.accounts.values() if a.email == wanted), None)

    async def save(self, account):
        self.call_log.append(("save", str(account.id)))
        self.accounts[str(account.id)] = account
        return account


class MockActivityLogRepository(IActivityLogRepository):
    """Mock activity log repository for testing."""

    def __init__(self):
        self.entries: List[ActivityLogEntry] = []
        self.call_log: List[tuple] = []

    async def add(self, entry):
        self.call_log.append(("add", entry.action))
        self.entries.append(entry)
        return entry

    async def list_recent(self, owner_id, limit=100):
        self.call_log.append(("list_recent", str(owner_id), limit))
        owned = [e for e in self.entries if e.owner_id == owner_id]
        owned.sort(key=lambda e: e.created_at, reverse=True)
        return owned[:limit]


class MockCustomFieldRepository(ICustomFieldRepository):
    """Mock custom field repository for testing."""

    def __init__(self):
        self.fields: Dict[str, CustomFieldDefinition] = {}
        self.call_log: List[tuple] = []

    async def get_by_id(self, field_id, owner_id):
        self.call_log.append(("get_by_id", str(field_id)))
        definition = self.fields.get(str(field_id))
        if definition is None or definition.owner_id != owner_id:
            return None
        return definition

    async def list_by_owner(self, owner_id):
        self.call_log.append(("list_by_owner", str(owner_id)))
        return [d for d in self.fields.values() if d.owner_id == owner_id]

    async def save(self, definition):
        self.call_log.append(("save", definition.name))
        self.fields[str(definition.id)] = definition
        return definition

    async def delete(self, field_id, owner_id):
        self.call_log.append(("delete", str(field_id)))
        definition = self.fields.get(str(field_id))
        if definition is None or definition.owner_id != owner_id:
            return False
        del self.fields[str(field_id)]
        return True


class MockCVRepository(ICVRepository):
    """Mock CV repository; deleted CVs are kept aside like a soft delete."""

    def __init__(self):
        self.cvs: Dict[str, CV] = {}
        self.deleted: Dict[str, CV] = {}
        self.call_log: List[tuple] = []

    async def get_by_id(self, cv_id, owner_id):
        self.call_log.append(("get_by_id", str(cv_id)))
        cv = self.cvs.get(str(cv_id))
        if cv is None or cv.owner_id != owner_id:
            return None
        return cv

    async def save(self, cv):
        self.call_log.append(("save", str(cv.id)))
        self.cvs[str(cv.id)] = cv
        return cv

    async def list_by_owner(self, owner_id):
        self.call_log.append(("list_by_owner", str(owner_id)))
        owned = [cv for cv in self.cvs.values() if cv.owner_id == owner_id]
        return sorted(owned, key=lambda cv: cv.uploaded_at, reverse=True)

    async def list_completed(self, owner_id):
        self.call_log.append(("list_completed", str(owner_id)))
        return [
            cv for cv in await self.list_by_owner(owner_id)
            if cv.parsed and cv.status == CVStatus.COMPLETED
        ]

    async def count_by_owner(self, owner_id):
        return sum(1 for cv in self.cvs.values() if cv.owner_id == owner_id)

    async def delete(self, cv_id, owner_id):
        self.call_log.append(("delete", str(cv_id)))
        cv = await self.get_by_id(cv_id, owner_id)
        if cv is None:
            return False
        self.deleted[str(cv_id)] = self.cvs.pop(str(cv_id))
        return True

    async def remove_match_results(self, owner_id, job_spec_id):
        self.call_log.append(("remove_match_results", str(job_spec_id)))
        removed = 0
        for cv in self.cvs.values():
            if cv.owner_id == owner_id and cv.remove_match(job_spec_id):
                removed += 1
        return removed


class MockJobSpecRepository(IJobSpecRepository):
    """Mock job specification repository for testing."""

    def __init__(self):
        self.job_specs: Dict[str, JobSpec] = {}
        self.call_log: List[tuple] = []

    async def get_by_id(self, job_spec_id, owner_id):
        self.call_log.append(("get_by_id", str(job_spec_id)))
        job_spec = self.job_specs.get(str(job_spec_id))
        if job_spec is None or job_spec.owner_id != owner_id or not job_spec.is_active:
            return None
        return job_spec

    async def save(self, job_spec):
        self.call_log.append(("save", str(job_spec.id)))
        self.job_specs[str(job_spec.id)] = job_spec
        return job_spec

    async def list_by_owner(self, owner_id, active_only=False):
        owned = [j for j in self.job_specs.values() if j.owner_id == owner_id]
        if active_only:
            owned = [j for j in owned if j.is_active]
        return sorted(owned, key=lambda j: j.created_at, reverse=True)

    async def count_by_owner(self, owner_id):
        return sum(1 for j in self.job_specs.values() if j.owner_id == owner_id and j.is_active)

    async def delete(self, job_spec_id, owner_id):
        self.call_log.append(("delete", str(job_spec_id)))
        job_spec = await self.get_by_id(job_spec_id, owner_id)
        if job_spec is None:
            return False
        job_spec.is_active = False
        return True


class MockTeamMemberRepository(ITeamMemberRepository):
    """Mock team member repository for testing."""

    def __init__(self):
        self.members: Dict[str, TeamMember] = {}
        self.call_log: List[tuple] = []

    async def get_by_id(self, member_id, owner_id):
        member = self.members.get(str(member_id))
        if member is None or member.owner_id != owner_id:
            return None
        return member

    async def get_by_user(self, user_id):
        self.call_log.append(("get_by_user", str(user_id)))
        return next((m for m in self.members.values() if m.user_id == user_id), None)

    async def get_by_email(self, owner_id, email):
        wanted = (email or "").strip().lower()
        return next(
            (m for m in self.members.values() if m.owner_id == owner_id and m.email == wanted),
            None,
        )

    async def list_by_owner(self, owner_id):
        return [m for m in self.members.values() if m.owner_id == owner_id]

    async def count_by_owner(self, owner_id):
        return len(await self.list_by_owner(owner_id))

    async def save(self, member):
        self.call_log.append(("save", member.email))
        self.members[str(member.id)] = member
        return member

    async def delete(self, member_id, owner_id):
        self.call_log.append(("delete", str(member_id)))
        if await self.get_by_id(member_id, owner_id) is None:
            return False
        del self.members[str(member_id)]
        return True


class MockTeamInviteRepository(ITeamInviteRepository):
    """Mock team invite repository for testing."""

    def __init__(self):
        self.invites: Dict[str, TeamInvite] = {}
        self.call_log: List[tuple] = []

    async def get_by_id(self, invite_id):
        return self.invites.get(str(invite_id))

    async def find_pending(self, owner_id, email):
        wanted = (email or "").strip().lower()
        return next(
            (
                i for i in self.invites.values()
                if i.owner_id == owner_id and i.email == wanted and i.status == InviteStatus.PENDING
            ),
            None,
        )

    async def list_pending(self, owner_id):
        return [
            i for i in self.invites.values()
            if i.owner_id == owner_id and i.status == InviteStatus.PENDING
        ]

    async def count_pending(self, owner_id):
        return len(await self.list_pending(owner_id))

    async def save(self, invite):
        self.call_log.append(("save", invite.email, invite.status))
        self.invites[str(invite.id)] = invite
        return invite


class MockCompanyRepository(ICompanyRepository):
    """Mock EEA company repository for testing."""

    def __init__(self):
        self.companies: Dict[str, Company] = {}
        self.call_log: List[tuple] = []

    async def get_by_owner(self, owner_id):
        return self.companies.get(str(owner_id))

    async def save(self, company):
        self.call_log.append(("save", company.name))
        self.companies[str(company.owner_id)] = company
        return company


class MockEmployeeRepository(IEmployeeRepository):
    """Mock employee repository for testing."""

    def __init__(self):
        self.employees: Dict[str, Employee] = {}
        self.call_log: List[tuple] = []
        self.batches: List[List[Employee]] = []

    async def get_by_id(self, employee_id, company_id):
        employee = self.employees.get(str(employee_id))
        if employee is None or employee.company_id != company_id:
            return None
        return employee

    async def get_by_employee_number(self, company_id, employee_number):
        return next(
            (
                e for e in self.employees.values()
                if e.company_id == company_id and e.employee_number == employee_number
            ),
            None,
        )

    async def list_by_company(self, company_id, status=None, occupational_level=None):
        matches = [e for e in self.employees.values() if e.company_id == company_id]
        if status is not None:
            matches = [e for e in matches if e.status == status]
        if occupational_level is not None:
            matches = [e for e in matches if e.occupational_level == occupational_level]
        return sorted(matches, key=lambda e: e.last_name)

    async def save(self, employee):
        self.call_log.append(("save", employee.employee_number))
        self.employees[str(employee.id)] = employee
        return employee

    async def save_many(self, employees):
        self.call_log.append(("save_many", len(employees)))
        self.batches.append(list(employees))
        for employee in employees:
            self.employees[str(employee.id)] = employee
        return list(employees)

    async def delete(self, employee_id, company_id):
        self.call_log.append(("delete", str(employee_id)))
        if await self.get_by_id(employee_id, company_id) is None:
            return False
        del self.employees[str(employee_id)]
        return True

    def add(self, *employees: Employee) -> None:
        """Seed employees without recording calls."""
        for employee in employees:
            self.employees[str(employee.id)] = employee


class MockSectorTargetRepository(ISectorTargetRepository):
    """Mock sector target repository; empty unless seeded."""

    def __init__(self, targets: Optional[List[SectorTarget]] = None):
        self.targets: List[SectorTarget] = list(targets or [])
        self.call_log: List[Tuple[str, str]] = []

    async def list_by_sector(self, sector):
        self.call_log.append(("list_by_sector", getattr(sector, "value", sector)))
        return [t for t in self.targets if t.sector == sector]
