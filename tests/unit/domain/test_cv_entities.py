"""Tests for CV, job specification and account aggregates plus identifiers."""

from uuid import uuid4

import pytest

from app.domain.entities.account import UserAccount
from app.domain.entities.cv import (
    CV,
    CVMetadata,
    CVStatus,
    EducationEntry,
    ExperienceEntry,
    StoredMatch,
)
from app.domain.entities.job_spec import JobSpec
from app.domain.plans import PlanName
from app.domain.value_objects import CVId, EmailAddress, JobSpecId, UserId
from tests.fixtures.workspace_fixtures import make_cv, make_job_spec


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def owner_id():
    return UserId(uuid4())


# =============================================================================
# VALUE OBJECTS
# =============================================================================


class TestIdentifiers:

    def test_string_and_uuid_compare_equal(self):
        raw = uuid4()
        assert UserId(str(raw)) == UserId(raw)
        assert str(CVId(raw)) == str(raw)

    def test_rejects_non_uuid_types(self):
        with pytest.raises(TypeError):
            JobSpecId(12345)

    def test_rejects_malformed_string(self):
        with pytest.raises(ValueError):
            CVId("not-a-uuid")

    def test_email_is_normalised(self):
        assert str(EmailAddress("  Recruiter@Example.COM ")) == "recruiter@example.com"

    def test_invalid_email(self):
        with pytest.raises(ValueError):
            EmailAddress("recruiter-at-example")


# =============================================================================
# CV
# =============================================================================


class TestCV:

    def test_requires_file_name(self, owner_id):
        with pytest.raises(ValueError, match="file name"):
            make_cv(owner_id, file_name="  ", parsed=False)

    def test_rejects_negative_size(self, owner_id):
        with pytest.raises(ValueError):
            make_cv(owner_id, parsed=False, file_size=-1)

    def test_new_cv_is_not_parsed(self, owner_id):
        cv = make_cv(owner_id, parsed=False)

        assert cv.status == CVStatus.UPLOADED
        assert not cv.is_parsed
        assert cv.display_name == "thandi_cv.pdf"

    def test_parsed_metadata_completes_cv(self, owner_id):
        cv = make_cv(owner_id, parsed=False)
        cv.mark_processing()
        cv.apply_parsed_metadata(CVMetadata(name="Sipho Dlamini"))

        assert cv.is_parsed
        assert cv.status == CVStatus.COMPLETED
        assert cv.display_name == "Sipho Dlamini"

    def test_failed_processing_clears_parsed_flag(self, owner_id):
        cv = make_cv(owner_id)
        cv.mark_processing_failed("Unreadable PDF")

        assert cv.status == CVStatus.FAILED
        assert not cv.is_parsed
        assert cv.processing_error == "Unreadable PDF"

    def test_match_results_are_keyed_by_job_spec(self, owner_id):
        cv = make_cv(owner_id)
        job_spec_id = JobSpecId.generate()
        cv.record_match(StoredMatch(job_spec_id=job_spec_id, score=82, quality="Very Good"))

        assert cv.match_score_for(job_spec_id) == 82
        assert cv.match_score_for(JobSpecId.generate()) == 0
        assert cv.match_score_for(None) == 0

        assert cv.remove_match(job_spec_id) is True
        assert cv.remove_match(job_spec_id) is False
        assert cv.match_score_for(job_spec_id) == 0

    def test_record_view_counts(self, owner_id):
        cv = make_cv(owner_id)
        cv.record_view()
        cv.record_view()

        assert cv.view_count == 2
        assert cv.last_viewed_at is not None


class TestMetadataHelpers:

    def test_period_prefers_duration(self):
        entry = ExperienceEntry(duration="2018 - 2021", start_date="2010")
        assert entry.period_text() == "2018 - 2021"

    def test_period_from_dates_defaults_to_present(self):
        assert ExperienceEntry(start_date="2019").period_text() == "2019 - Present"

    def test_period_empty_without_dates(self):
        assert ExperienceEntry(title="Clerk").period_text() == ""

    def test_highest_education_uses_first_entry(self):
        metadata = CVMetadata(
            education=[
                EducationEntry(field_of_study="Computer Science"),
                EducationEntry(degree="Matric"),
            ]
        )
        assert metadata.highest_education_text == "Computer Science"
        assert CVMetadata().highest_education_text == ""


# =============================================================================
# JOB SPECIFICATION
# =============================================================================


class TestJobSpec:

    def test_title_required(self, owner_id):
        with pytest.raises(ValueError, match="title"):
            make_job_spec(owner_id, title="   ")

    def test_title_length_limited(self, owner_id):
        with pytest.raises(ValueError):
            make_job_spec(owner_id, title="x" * 201)

    def test_experience_range_validated(self, owner_id):
        with pytest.raises(ValueError, match="Minimum experience"):
            make_job_spec(owner_id, min_experience=10, max_experience=2)

    def test_negative_experience_rejected(self, owner_id):
        with pytest.raises(ValueError, match="cannot be negative"):
            make_job_spec(owner_id, min_experience=-1)

    def test_age_range_validated(self, owner_id):
        with pytest.raises(ValueError, match="age"):
            make_job_spec(owner_id, min_age=40, max_age=30)

    def test_update_ignores_identity_fields(self, owner_id):
        job_spec = make_job_spec(owner_id)
        original_id = job_spec.id
        editor = UserId(uuid4())

        job_spec.update(editor, id=JobSpecId.generate(), title="Senior Data Analyst")

        assert job_spec.id == original_id
        assert job_spec.title == "Senior Data Analyst"
        assert job_spec.updated_by == editor

    def test_update_rejects_unknown_fields(self, owner_id):
        job_spec = make_job_spec(owner_id)
        with pytest.raises(ValueError, match="Unknown"):
            job_spec.update(owner_id, salary=100)

    def test_update_revalidates(self, owner_id):
        job_spec = make_job_spec(owner_id)
        with pytest.raises(ValueError):
            job_spec.update(owner_id, min_experience=20)

    def test_target_industry_falls_back_to_department(self, owner_id):
        job_spec = JobSpec(
            id=JobSpecId.generate(),
            owner_id=owner_id,
            created_by=owner_id,
            title="Accountant",
            department="Finance",
        )
        assert job_spec.target_industry == "Finance"

    def test_deactivate(self, owner_id):
        job_spec = make_job_spec(owner_id)
        job_spec.deactivate(owner_id)

        assert job_spec.is_active is False
        assert job_spec.updated_by == owner_id


# =============================================================================
# ACCOUNT
# =============================================================================


class TestUserAccount:

    def test_normalises_email_and_plan(self):
        account = UserAccount(id=UserId(uuid4()), email=" Owner@Example.com ", plan="Business")

        assert account.email == "owner@example.com"
        assert account.plan == PlanName.BUSINESS

    def test_sync_profile_reports_changes(self):
        account = UserAccount(id=UserId(uuid4()), email="owner@example.com", display_name="Owner")

        assert account.sync_profile("owner@example.com", "Owner", None) is False
        assert account.sync_profile("owner@example.com", "Owner", "professional") is True
        assert account.plan == PlanName.PROFESSIONAL

    def test_sync_profile_keeps_existing_name_when_missing(self):
        account = UserAccount(id=UserId(uuid4()), email="owner@example.com", display_name="Owner")

        account.sync_profile("new@example.com", None, None)

        assert account.display_name == "Owner"
        assert account.email == "new@example.com"
