"""
Integration tests for the HTTP API.

Requests go through the real FastAPI app and routers; application services
are wired to in-memory repositories through dependency overrides.
"""

from unittest.mock import AsyncMock, Mock

import httpx
import pytest

from app.api.dependencies import (
    get_account_service,
    get_cv_service,
    get_eea_import_service,
    get_job_spec_service,
    get_team_service,
)
from app.application.account_service import AccountApplicationService
from app.application.activity_log_service import ActivityLogApplicationService
from app.application.cv_service import CVApplicationService
from app.application.dependencies.account_dependencies import AccountDependencies
from app.application.dependencies.activity_log_dependencies import ActivityLogDependencies
from app.application.dependencies.cv_dependencies import CVDependencies
from app.application.dependencies.eea_dependencies import EEADependencies
from app.application.dependencies.job_spec_dependencies import JobSpecDependencies
from app.application.eea_import_service import EEAImportApplicationService
from app.application.job_spec_service import JobSpecApplicationService
from app.application.team_service import TeamApplicationService
from app.application.workspace import WorkspaceContext
from app.core.dependencies import get_workspace_context
from app.domain.interfaces import IFileStorage
from app.domain.services.cv_filter_service import CVFilterService
from app.domain.services.eea.compliance_engine import ComplianceEngine
from app.domain.value_objects import CVId, JobSpecId
from app.main import create_app
from app.utils.security import TokenManager
from tests.fixtures.workspace_fixtures import make_company, make_cv, make_job_spec
from tests.mocks.mock_repositories import (
    MockActivityLogRepository,
    MockCompanyRepository,
    MockCustomFieldRepository,
    MockCVRepository,
    MockEmployeeRepository,
    MockJobSpecRepository,
    MockSectorTargetRepository,
    MockUserAccountRepository,
)

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


class WorkspaceHolder:
    """Lets a test switch the workspace the overridden dependency resolves to."""

    def __init__(self, workspace: WorkspaceContext):
        self.workspace = workspace


@pytest.fixture
def current(workspace):
    return WorkspaceHolder(workspace)


@pytest.fixture
def job_spec_repository():
    return MockJobSpecRepository()


@pytest.fixture
def cv_repository():
    return MockCVRepository()


@pytest.fixture
def company_repository():
    return MockCompanyRepository()


@pytest.fixture
def employee_repository():
    return MockEmployeeRepository()


@pytest.fixture
def app(current, job_spec_repository, cv_repository, company_repository, employee_repository):
    application = create_app()

    job_spec_service = JobSpecApplicationService(
        JobSpecDependencies(
            job_spec_repository=job_spec_repository,
            cv_repository=cv_repository,
            activity_logger=ActivityLogApplicationService(
                ActivityLogDependencies(activity_log_repository=MockActivityLogRepository())
            ),
        )
    )
    import_service = EEAImportApplicationService(
        EEADependencies(
            company_repository=company_repository,
            employee_repository=employee_repository,
            sector_target_repository=MockSectorTargetRepository(),
            compliance_engine=ComplianceEngine(),
        )
    )

    application.dependency_overrides[get_workspace_context] = lambda: current.workspace
    application.dependency_overrides[get_job_spec_service] = lambda: job_spec_service
    application.dependency_overrides[get_eea_import_service] = lambda: import_service
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
async def client(app):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as http_client:
        yield http_client


# ========================================================================
# Job specifications
# ========================================================================


class TestJobSpecEndpoints:

    @pytest.mark.asyncio
    async def test_create_and_list(self, client):
        response = await client.post(
            "/api/v1/job-specs/",
            json={"title": "Data Analyst", "location_type": "hybrid", "required_skills": ["Python", "SQL"]},
        )

        assert response.status_code == 201
        created = response.json()
        assert created["title"] == "Data Analyst"
        assert created["location_type"] == "hybrid"

        listed = (await client.get("/api/v1/job-specs/")).json()
        assert [spec["id"] for spec in listed] == [created["id"]]

    @pytest.mark.asyncio
    async def test_plan_limit_is_429(self, client, current, free_workspace):
        current.workspace = free_workspace
        await client.post("/api/v1/job-specs/", json={"title": "First"})

        response = await client.post("/api/v1/job-specs/", json={"title": "Second"})

        assert response.status_code == 429

    @pytest.mark.asyncio
    async def test_invalid_experience_range_is_400(self, client):
        response = await client.post(
            "/api/v1/job-specs/", json={"title": "Analyst", "min_experience": 9, "max_experience": 2}
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_schema_violation_is_422(self, client):
        response = await client.post("/api/v1/job-specs/", json={"title": ""})

        assert response.status_code == 422

    @pytest.mark.asyncio
    @pytest.mark.parametrize("job_spec_id", [str(JobSpecId.generate()), "not-an-id"])
    async def test_unknown_job_spec_is_404(self, client, job_spec_id):
        response = await client.get(f"/api/v1/job-specs/{job_spec_id}")

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_member_cannot_delete(self, client, current, member_workspace, job_spec_repository):
        job_spec = await job_spec_repository.save(make_job_spec(member_workspace.owner_id))
        current.workspace = member_workspace

        response = await client.delete(f"/api/v1/job-specs/{job_spec.id}")

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_owner_delete(self, client, workspace, job_spec_repository):
        job_spec = await job_spec_repository.save(make_job_spec(workspace.owner_id))

        response = await client.delete(f"/api/v1/job-specs/{job_spec.id}")

        assert response.status_code == 200
        assert response.json()["details"] == {"matches_cleared": 0}


# ========================================================================
# Employee import
# ========================================================================


class TestEmployeeImportEndpoints:

    @pytest.mark.asyncio
    async def test_row_errors_are_listed(self, client, workspace, company_repository):
        await company_repository.save(make_company(workspace.owner_id))
        content = (
            "Employee Number,First Name,Last Name,Gender,Race,Occupational Level,Annual Fixed Income\n"
            "EMP1,Thandi,Nkosi,Female,Purple,Skilled Technical,250000\n"
        ).encode("utf-8")

        response = await client.post(
            "/api/v1/eea/employees/import",
            files={"file": ("staff.csv", content, "text/csv")},
        )

        assert response.status_code == 400
        assert response.json()["detail"]["errors"] == [
            "Row 2: Invalid race (must be African, Coloured, Indian, or White)"
        ]

    @pytest.mark.asyncio
    async def test_import_creates_employees(self, client, workspace, company_repository, employee_repository):
        await company_repository.save(make_company(workspace.owner_id))
        content = (
            "Employee Number,First Name,Last Name,Gender,Race,Occupational Level,Annual Fixed Income\n"
            "EMP1,Thandi,Nkosi,Female,African,Skilled Technical,250000\n"
        ).encode("utf-8")

        response = await client.post(
            "/api/v1/eea/employees/import",
            files={"file": ("staff.csv", content, "text/csv")},
        )

        assert response.status_code == 200
        assert response.json() == {"success": True, "created": 1, "updated": 0, "total": 1}
        assert len(employee_repository.employees) == 1

    @pytest.mark.asyncio
    async def test_import_without_company_is_404(self, client):
        response = await client.post(
            "/api/v1/eea/employees/import",
            files={"file": ("staff.csv", b"Employee Number\nEMP1\n", "text/csv")},
        )

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_template_download(self, client):
        response = await client.get("/api/v1/eea/employees/import/template")

        assert response.status_code == 200
        assert response.headers["content-type"] == XLSX_MEDIA_TYPE
        assert "EEA_Employee_Import_Template.xlsx" in response.headers["content-disposition"]

    @pytest.mark.asyncio
    async def test_template_requires_eea_plan(self, client, current, free_workspace):
        current.workspace = free_workspace

        response = await client.get("/api/v1/eea/employees/import/template")

        assert response.status_code == 403


# ========================================================================
# CV downloads
# ========================================================================


class TestCVDownloadEndpoints:

    @pytest.fixture
    def file_storage(self):
        storage = Mock(spec=IFileStorage)
        storage.retrieve_file = AsyncMock(return_value=b"%PDF-1.4 stored")
        return storage

    @pytest.fixture
    def cv_app(self, app, cv_repository, file_storage):
        cv_service = CVApplicationService(
            CVDependencies(
                cv_repository=cv_repository,
                custom_field_repository=MockCustomFieldRepository(),
                file_storage=file_storage,
                filter_service=CVFilterService(),
                activity_logger=ActivityLogApplicationService(
                    ActivityLogDependencies(activity_log_repository=MockActivityLogRepository())
                ),
            )
        )
        app.dependency_overrides[get_cv_service] = lambda: cv_service
        return app

    @pytest.mark.asyncio
    async def test_download_non_latin_file_name(self, cv_app, client, workspace, cv_repository):
        cv = await cv_repository.save(make_cv(workspace.owner_id, file_name="履歴書.pdf"))

        response = await client.get(f"/api/v1/cvs/{cv.id}/file")

        assert response.status_code == 200
        assert response.content == b"%PDF-1.4 stored"
        disposition = response.headers["content-disposition"]
        assert 'filename="download.pdf"' in disposition
        assert "filename*=UTF-8''%E5%B1%A5%E6%AD%B4%E6%9B%B8.pdf" in disposition

    @pytest.mark.asyncio
    async def test_missing_stored_file_is_404(self, cv_app, client, workspace, cv_repository, file_storage):
        cv = await cv_repository.save(make_cv(workspace.owner_id))
        file_storage.retrieve_file.side_effect = FileNotFoundError(cv.storage_path)

        response = await client.get(f"/api/v1/cvs/{cv.id}/file")

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_storage_failure_is_500(self, cv_app, client, workspace, cv_repository, file_storage):
        cv = await cv_repository.save(make_cv(workspace.owner_id))
        file_storage.retrieve_file.side_effect = OSError("disk unavailable")

        response = await client.get(f"/api/v1/cvs/{cv.id}/file")

        assert response.status_code == 500
        assert response.json()["detail"] == "Failed to download CV"

    @pytest.mark.asyncio
    async def test_list_filter_descriptions(self, client):
        schema = (await client.get("/openapi.json")).json()

        parameters = {p["name"]: p for p in schema["paths"]["/api/v1/cvs/"]["get"]["parameters"]}
        assert parameters["search"]["description"] == "Free-text search over name, email, phone and location"
        assert parameters["skills"]["description"] == "Comma-separated skills, any may match"

    @pytest.mark.asyncio
    async def test_unknown_cv_is_404(self, cv_app, client):
        response = await client.get(f"/api/v1/cvs/{CVId.generate()}/file")

        assert response.status_code == 404


# ========================================================================
# Authentication
# ========================================================================


class TestAuthentication:

    @pytest.fixture
    def auth_app(self, app, cv_repository, job_spec_repository):
        """App that resolves the workspace from a real bearer token."""
        account_service = AccountApplicationService(
            AccountDependencies(
                account_repository=MockUserAccountRepository(),
                cv_repository=cv_repository,
                job_spec_repository=job_spec_repository,
            )
        )
        team_service = Mock(spec=TeamApplicationService)
        team_service.resolve_workspace = AsyncMock(side_effect=WorkspaceContext.personal)

        del app.dependency_overrides[get_workspace_context]
        app.dependency_overrides[get_account_service] = lambda: account_service
        app.dependency_overrides[get_team_service] = lambda: team_service
        return app

    @pytest.mark.asyncio
    async def test_missing_token_is_401(self, auth_app, client):
        response = await client.get("/api/v1/job-specs/")

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_invalid_token_is_401(self, auth_app, client):
        response = await client.get("/api/v1/job-specs/", headers={"Authorization": "Bearer nonsense"})

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_account_overview_with_token(self, auth_app, client, owner_user):
        token = TokenManager().create_access_token(
            str(owner_user.user_id), owner_user.email, name=owner_user.display_name, plan="professional"
        )

        response = await client.get("/api/v1/accounts/me", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 200
        body = response.json()
        assert body["user_id"] == str(owner_user.user_id)
        assert body["account_plan"] == "professional"
        assert body["usage"] == {"cvs": 0, "job_specs": 0}
