"""
Unit tests for CVApplicationService.

Covers upload validation and plan limits, parsed metadata, custom field
values, deletion and CSV export.
"""

from unittest.mock import AsyncMock, Mock

import pytest

from app.application.activity_log_service import ActivityLogApplicationService
from app.application.cv_service import CSV_EXPORT_COLUMNS, CVApplicationService
from app.application.dependencies.activity_log_dependencies import ActivityLogDependencies
from app.application.dependencies.cv_dependencies import CVDependencies
from app.application.workspace import WorkspaceContext
from app.domain.entities.activity_log import ActivityAction
from app.domain.entities.custom_field import CustomFieldDefinition, CustomFieldType
from app.domain.entities.cv import CVMetadata, CVStatus, StoredMatch
from app.domain.exceptions import (
    CVNotFoundError,
    FileSizeExceededError,
    InvalidFileError,
    LimitExceededError,
    PlanFeatureUnavailableError,
    ValidationError,
)
from app.domain.interfaces import IFileStorage
from app.domain.plans import PlanName
from app.domain.services.cv_filter_service import CVFilterCriteria, CVFilterService
from app.domain.value_objects import CustomFieldId, CVId, JobSpecId
from tests.fixtures.workspace_fixtures import make_cv, make_metadata, make_user
from tests.mocks.mock_repositories import (
    MockActivityLogRepository,
    MockCustomFieldRepository,
    MockCVRepository,
)

# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def cv_repository():
    return MockCVRepository()


@pytest.fixture
def custom_field_repository():
    return MockCustomFieldRepository()


@pytest.fixture
def activity_log_repository():
    return MockActivityLogRepository()


@pytest.fixture
def mock_file_storage():
    storage = Mock(spec=IFileStorage)

    async def save_file(owner_id, cv_id, filename, content):
        return f"{owner_id}/{cv_id}/{filename}"

    storage.save_file = AsyncMock(side_effect=save_file)
    storage.retrieve_file = AsyncMock(return_value=b"%PDF-1.4 stored")
    storage.delete_file = AsyncMock(return_value=True)
    return storage


@pytest.fixture
def cv_dependencies(cv_repository, custom_field_repository, activity_log_repository, mock_file_storage):
    return CVDependencies(
        cv_repository=cv_repository,
        custom_field_repository=custom_field_repository,
        file_storage=mock_file_storage,
        filter_service=CVFilterService(current_year=2024),
        activity_logger=ActivityLogApplicationService(
            ActivityLogDependencies(activity_log_repository=activity_log_repository)
        ),
        max_file_size=1024,
    )


@pytest.fixture
def cv_service(cv_dependencies):
    return CVApplicationService(cv_dependencies)


@pytest.fixture
async def stored_cv(cv_repository, workspace):
    return await cv_repository.save(make_cv(workspace.owner_id))


@pytest.fixture
async def custom_fields(custom_field_repository, workspace):
    """Notice period (required select), driver license and a licence code that depends on it."""
    definitions = [
        CustomFieldDefinition(
            id=CustomFieldId.generate(), owner_id=workspace.owner_id, name="notice_period", label="Notice Period",
            field_type=CustomFieldType.SELECT, required=True, options=["Immediate", "1 Month"], order=0,
        ),
        CustomFieldDefinition(
            id=CustomFieldId.generate(), owner_id=workspace.owner_id, name="driver_license", label="Driver License",
            field_type=CustomFieldType.BOOLEAN, order=1,
        ),
        CustomFieldDefinition(
            id=CustomFieldId.generate(), owner_id=workspace.owner_id, name="licence_code", label="Licence Code",
            conditional_on="driver_license", conditional_value="true", order=2,
        ),
    ]
    for definition in definitions:
        await custom_field_repository.save(definition)
    return definitions


def workspace_on(plan):
    return WorkspaceContext.personal(make_user(plan=plan))


# =============================================================================
# UPLOAD
# =============================================================================


class TestUploadCV:

    @pytest.mark.asyncio
    async def test_stores_file_and_registers_cv(
        self, cv_service, workspace, cv_repository, mock_file_storage, activity_log_repository
    ):
        cv = await cv_service.upload_cv(workspace, "Thandi CV.PDF", b"%PDF-1.4 content")

        assert cv.status == CVStatus.UPLOADED
        assert not cv.parsed
        assert cv.file_type == "pdf"
        assert cv.file_size == 16
        assert cv.uploaded_by == workspace.user_id
        assert cv.storage_path == f"{workspace.owner_id}/{cv.id}/Thandi CV.PDF"
        assert str(cv.id) in cv_repository.cvs
        mock_file_storage.save_file.assert_awaited_once()

        [entry] = activity_log_repository.entries
        assert entry.action == ActivityAction.CV_UPLOADED
        assert entry.metadata == {"file_size": 16, "file_type": "pdf"}

    @pytest.mark.asyncio
    async def test_rejects_unsupported_type(self, cv_service, workspace, mock_file_storage):
        with pytest.raises(InvalidFileError):
            await cv_service.upload_cv(workspace, "photo.png", b"data")

        mock_file_storage.save_file.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_rejects_empty_file(self, cv_service, workspace):
        with pytest.raises(InvalidFileError, match="File is empty"):
            await cv_service.upload_cv(workspace, "cv.pdf", b"")

    @pytest.mark.asyncio
    async def test_rejects_oversized_file(self, cv_service, workspace):
        with pytest.raises(FileSizeExceededError):
            await cv_service.upload_cv(workspace, "cv.pdf", b"x" * 1025)

    @pytest.mark.asyncio
    async def test_plan_cv_limit(self, cv_service, cv_repository):
        free = workspace_on(PlanName.FREE)
        for _ in range(10):
            await cv_repository.save(make_cv(free.owner_id))

        with pytest.raises(LimitExceededError) as exc_info:
            await cv_service.upload_cv(free, "cv.pdf", b"data")

        assert exc_info.value.limit == 10
        assert "free plan allows up to 10 CVs" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_removes_stored_file_when_save_fails(self, cv_service, workspace, cv_repository, mock_file_storage):
        cv_repository.save = AsyncMock(side_effect=RuntimeError("database unavailable"))

        with pytest.raises(RuntimeError):
            await cv_service.upload_cv(workspace, "cv.pdf", b"data")

        owner_id, cv_id, _, _ = mock_file_storage.save_file.await_args.args
        mock_file_storage.delete_file.assert_awaited_once_with(f"{owner_id}/{cv_id}/cv.pdf")


class TestBulkUpload:

    @pytest.mark.asyncio
    async def test_free_plan_cannot_upload_several(self, cv_service):
        with pytest.raises(PlanFeatureUnavailableError):
            await cv_service.upload_cvs(workspace_on(PlanName.FREE), [("a.pdf", b"a"), ("b.pdf", b"b")])

    @pytest.mark.asyncio
    async def test_single_file_needs_no_bulk_feature(self, cv_service):
        result = await cv_service.upload_cvs(workspace_on(PlanName.FREE), [("a.pdf", b"a")])

        assert len(result.uploaded) == 1

    @pytest.mark.asyncio
    async def test_files_fail_independently(self, cv_service, workspace):
        result = await cv_service.upload_cvs(workspace, [("a.pdf", b"a"), ("b.exe", b"b"), ("c.docx", b"c")])

        assert [cv.file_name for cv in result.uploaded] == ["a.pdf", "c.docx"]
        assert [failure["file_name"] for failure in result.failed] == ["b.exe"]
        assert "Unsupported file type" in result.failed[0]["error"]

    @pytest.mark.asyncio
    async def test_plan_limit_stops_the_batch(self, cv_service, cv_repository):
        starter = workspace_on(PlanName.STARTER)
        for _ in range(50):
            await cv_repository.save(make_cv(starter.owner_id))

        with pytest.raises(LimitExceededError):
            await cv_service.upload_cvs(starter, [("a.pdf", b"a"), ("b.pdf", b"b")])


# =============================================================================
# READ
# =============================================================================


class TestReadCV:

    @pytest.mark.asyncio
    async def test_get_counts_view(self, cv_service, workspace, stored_cv, activity_log_repository):
        cv = await cv_service.get_cv(workspace, stored_cv.id)

        assert cv.view_count == 1
        assert cv.last_viewed_at is not None
        assert activity_log_repository.entries[0].action == ActivityAction.CV_VIEWED
        assert activity_log_repository.entries[0].resource_name == "Thandi Nkosi"

    @pytest.mark.asyncio
    async def test_unknown_cv(self, cv_service, workspace):
        with pytest.raises(CVNotFoundError):
            await cv_service.get_cv(workspace, CVId.generate())

    @pytest.mark.asyncio
    async def test_other_workspace_cannot_read(self, cv_service, stored_cv):
        with pytest.raises(CVNotFoundError):
            await cv_service.get_cv(workspace_on(PlanName.PROFESSIONAL), stored_cv.id)

    @pytest.mark.asyncio
    async def test_team_member_reads_owner_cv(self, cv_service, member_workspace, stored_cv):
        cv = await cv_service.get_cv(member_workspace, stored_cv.id)

        assert cv.id == stored_cv.id

    @pytest.mark.asyncio
    async def test_download(self, cv_service, workspace, stored_cv, mock_file_storage):
        cv, content = await cv_service.download_cv_file(workspace, stored_cv.id)

        assert content == b"%PDF-1.4 stored"
        mock_file_storage.retrieve_file.assert_awaited_once_with(stored_cv.storage_path)

    @pytest.mark.asyncio
    async def test_download_with_missing_file_is_not_found(self, cv_service, workspace, stored_cv, mock_file_storage):
        mock_file_storage.retrieve_file.side_effect = FileNotFoundError(stored_cv.storage_path)

        with pytest.raises(CVNotFoundError, match="File for CV"):
            await cv_service.download_cv_file(workspace, stored_cv.id)


class TestListCVs:

    @pytest.mark.asyncio
    async def test_basic_filters_on_free_plan(self, cv_service, cv_repository):
        free = workspace_on(PlanName.FREE)
        thandi = await cv_repository.save(make_cv(free.owner_id))
        await cv_repository.save(make_cv(free.owner_id, metadata=make_metadata(name="Sipho Dube", email="sipho@example.com")))

        result = await cv_service.list_cvs(free, CVFilterCriteria(search="thandi"))

        assert [cv.id for cv in result] == [thandi.id]

    @pytest.mark.asyncio
    async def test_advanced_filters_need_plan(self, cv_service):
        with pytest.raises(PlanFeatureUnavailableError):
            await cv_service.list_cvs(workspace_on(PlanName.FREE), CVFilterCriteria(gender="female"))

    @pytest.mark.asyncio
    async def test_custom_field_filters_need_plan(self, cv_service):
        criteria = CVFilterCriteria(custom_fields={"driver_license": "true"})

        with pytest.raises(PlanFeatureUnavailableError):
            await cv_service.list_cvs(workspace_on(PlanName.BASIC), criteria)

    @pytest.mark.asyncio
    async def test_custom_field_filter(self, cv_service, workspace, cv_repository, custom_fields):
        driver = make_cv(workspace.owner_id)
        driver.set_custom_field_values({"driver_license": True})
        await cv_repository.save(driver)
        await cv_repository.save(make_cv(workspace.owner_id))

        result = await cv_service.list_cvs(workspace, CVFilterCriteria(custom_fields={"driver_license": "true"}))

        assert [cv.id for cv in result] == [driver.id]


# =============================================================================
# PARSING RESULTS
# =============================================================================


class TestParsingResults:

    @pytest.mark.asyncio
    async def test_apply_parsed_metadata_normalises(self, cv_service, workspace, cv_repository):
        cv = await cv_repository.save(make_cv(workspace.owner_id, parsed=False))

        updated = await cv_service.apply_parsed_metadata(
            workspace, cv.id, CVMetadata(name="Thandi", phone="082 123 4567", location="jhb", skills=["js", "py"])
        )

        assert updated.status == CVStatus.COMPLETED
        assert updated.is_parsed
        assert updated.metadata.phone == "+27821234567"
        assert updated.metadata.location == "Johannesburg"
        assert updated.metadata.skills == ["JavaScript", "Python"]

    @pytest.mark.asyncio
    async def test_mark_parsing_failed(self, cv_service, workspace, cv_repository):
        cv = await cv_repository.save(make_cv(workspace.owner_id, parsed=False))

        failed = await cv_service.mark_parsing_failed(workspace, cv.id, "Unreadable scan")

        assert failed.status == CVStatus.FAILED
        assert failed.processing_error == "Unreadable scan"


class TestCustomFieldValues:

    @pytest.mark.asyncio
    async def test_stores_coerced_values(self, cv_service, workspace, stored_cv, custom_fields, activity_log_repository):
        cv = await cv_service.update_custom_fields(
            workspace, stored_cv.id, {"notice_period": "1 month", "driver_license": True, "licence_code": "EB"}
        )

        assert cv.custom_fields == {"notice_period": "1 Month", "driver_license": True, "licence_code": "EB"}
        assert activity_log_repository.entries[0].metadata == {
            "change": "custom_fields",
            "fields": ["driver_license", "licence_code", "notice_period"],
        }

    @pytest.mark.asyncio
    async def test_merges_and_clears_inactive_conditionals(self, cv_service, workspace, stored_cv, custom_fields):
        await cv_service.update_custom_fields(
            workspace, stored_cv.id, {"notice_period": "Immediate", "driver_license": True, "licence_code": "B"}
        )

        cv = await cv_service.update_custom_fields(workspace, stored_cv.id, {"driver_license": "no"})

        assert cv.custom_fields == {"notice_period": "Immediate", "driver_license": False}

    @pytest.mark.asyncio
    async def test_reports_every_invalid_value(self, cv_service, workspace, stored_cv, custom_fields):
        with pytest.raises(ValidationError) as exc_info:
            await cv_service.update_custom_fields(workspace, stored_cv.id, {"driver_license": "maybe"})

        message = str(exc_info.value)
        assert "Notice Period is required" in message
        assert "Driver License must be yes or no" in message

    @pytest.mark.asyncio
    async def test_unknown_fields(self, cv_service, workspace, stored_cv, custom_fields):
        with pytest.raises(ValidationError, match="Unknown custom field"):
            await cv_service.update_custom_fields(workspace, stored_cv.id, {"shoe_size": 9})

    @pytest.mark.asyncio
    async def test_plan_gate(self, cv_service, free_workspace):
        with pytest.raises(PlanFeatureUnavailableError):
            await cv_service.update_custom_fields(free_workspace, CVId.generate(), {})


# =============================================================================
# DELETE AND EXPORT
# =============================================================================


class TestDeleteCV:

    @pytest.mark.asyncio
    async def test_member_can_delete(
        self, cv_service, member_workspace, stored_cv, cv_repository, mock_file_storage, activity_log_repository
    ):
        await cv_service.delete_cv(member_workspace, stored_cv.id)

        assert str(stored_cv.id) in cv_repository.deleted
        mock_file_storage.delete_file.assert_awaited_once_with(stored_cv.storage_path)
        entry = activity_log_repository.entries[0]
        assert entry.action == ActivityAction.CV_DELETED
        assert entry.is_team_member_action

    @pytest.mark.asyncio
    async def test_missing_file_still_deletes_record(self, cv_service, workspace, stored_cv, cv_repository, mock_file_storage):
        mock_file_storage.delete_file.return_value = False

        await cv_service.delete_cv(workspace, stored_cv.id)

        assert str(stored_cv.id) not in cv_repository.cvs


class TestExportCSV:

    @staticmethod
    def collect(lines):
        return "".join(lines).splitlines()

    @pytest.mark.asyncio
    async def test_header_and_rows(self, cv_service, workspace, stored_cv, custom_fields):
        stored_cv.set_custom_field_values({"notice_period": "Immediate", "driver_license": True})

        lines = self.collect(await cv_service.export_cvs_csv(workspace))

        assert lines[0] == ",".join(CSV_EXPORT_COLUMNS) + ",Notice Period,Driver License,Licence Code"
        assert lines[1].startswith("Thandi Nkosi,thandi@example.com,+27821234567,")
        assert "Python; SQL; Power BI; Microsoft Excel" in lines[1]
        assert lines[1].endswith(",Immediate,Yes,")
        assert len(lines) == 2

    @pytest.mark.asyncio
    async def test_free_plan_export_has_no_custom_columns(self, cv_service, cv_repository):
        free = workspace_on(PlanName.FREE)
        await cv_repository.save(make_cv(free.owner_id))

        lines = self.collect(await cv_service.export_cvs_csv(free))

        assert lines[0] == ",".join(CSV_EXPORT_COLUMNS)

    @pytest.mark.asyncio
    async def test_match_score_column_for_job_spec(self, cv_service, workspace, stored_cv):
        job_spec_id = JobSpecId.generate()
        stored_cv.record_match(StoredMatch(job_spec_id=job_spec_id, score=87, quality="Excellent"))

        lines = self.collect(await cv_service.export_cvs_csv(workspace, CVFilterCriteria(job_spec_id=job_spec_id)))

        assert lines[0].endswith(",Uploaded At,Match Score")
        assert lines[1].endswith(",87")
