"""Unit tests for MatchingApplicationService."""

from unittest.mock import Mock

import pytest

from app.application.dependencies.matching_dependencies import MatchingDependencies
from app.application.matching_service import BatchMatchSummary, MatchingApplicationService
from app.domain.entities.cv import CVMetadata, EducationEntry, ExperienceEntry
from app.domain.exceptions import (
    CVNotFoundError,
    JobSpecNotFoundError,
    MatchResultNotFoundError,
    ValidationError,
)
from app.domain.services.matching_service import AdvancedMatchingService, MatchResult
from app.domain.value_objects import CVId, JobSpecId
from tests.fixtures.workspace_fixtures import make_cv, make_job_spec
from tests.mocks.mock_repositories import MockCVRepository, MockJobSpecRepository

# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def cv_repository():
    return MockCVRepository()


@pytest.fixture
def job_spec_repository():
    return MockJobSpecRepository()


@pytest.fixture
def matching_service(cv_repository, job_spec_repository):
    return MatchingApplicationService(
        MatchingDependencies(
            cv_repository=cv_repository,
            job_spec_repository=job_spec_repository,
            matching_service=AdvancedMatchingService(current_year=2024),
        )
    )


@pytest.fixture
async def job_spec(job_spec_repository, workspace):
    return await job_spec_repository.save(make_job_spec(workspace.owner_id))


@pytest.fixture
async def analyst_cv(cv_repository, workspace):
    return await cv_repository.save(make_cv(workspace.owner_id))


@pytest.fixture
async def chef_cv(cv_repository, workspace):
    metadata = CVMetadata(
        name="Pierre Botha",
        location="Durban",
        skills=["Cooking"],
        experience=[ExperienceEntry(title="Head Chef", duration="2015 - 2020")],
        education=[EducationEntry(degree="High School Certificate")],
    )
    return await cv_repository.save(make_cv(workspace.owner_id, metadata=metadata, file_name="pierre.pdf"))


# =============================================================================
# SINGLE MATCH
# =============================================================================


class TestMatchCV:

    @pytest.mark.asyncio
    async def test_stores_result_on_cv(self, matching_service, workspace, job_spec, analyst_cv):
        result = await matching_service.match_cv(workspace, job_spec.id, analyst_cv.id)

        stored = analyst_cv.match_results[str(job_spec.id)]
        assert stored.score == result.score
        assert stored.quality == result.quality
        assert stored.breakdown["title"]["score"] == result.breakdown.title.score
        assert stored.recommendation == result.recommendation
        assert analyst_cv.match_score_for(job_spec.id) == result.score

    @pytest.mark.asyncio
    async def test_unparsed_cv(self, matching_service, workspace, job_spec, cv_repository):
        pending = await cv_repository.save(make_cv(workspace.owner_id, parsed=False))

        with pytest.raises(ValidationError, match="not been parsed"):
            await matching_service.match_cv(workspace, job_spec.id, pending.id)

    @pytest.mark.asyncio
    async def test_unknown_job_spec(self, matching_service, workspace, analyst_cv):
        with pytest.raises(JobSpecNotFoundError):
            await matching_service.match_cv(workspace, JobSpecId.generate(), analyst_cv.id)

    @pytest.mark.asyncio
    async def test_unknown_cv(self, matching_service, workspace, job_spec):
        with pytest.raises(CVNotFoundError):
            await matching_service.match_cv(workspace, job_spec.id, CVId.generate())

    @pytest.mark.asyncio
    async def test_inactive_job_spec(self, matching_service, workspace, job_spec, analyst_cv):
        job_spec.deactivate(workspace.user_id)

        with pytest.raises(JobSpecNotFoundError):
            await matching_service.match_cv(workspace, job_spec.id, analyst_cv.id)


# =============================================================================
# BATCH MATCH
# =============================================================================


class TestBatchMatch:

    @pytest.mark.asyncio
    async def test_ranks_parsed_cvs(self, matching_service, workspace, job_spec, analyst_cv, chef_cv, cv_repository):
        pending = await cv_repository.save(make_cv(workspace.owner_id, parsed=False))

        summary = await matching_service.batch_match(workspace, job_spec.id)

        assert summary.total == 2
        assert [r.cv_id for r in summary.results] == [analyst_cv.id, chef_cv.id]
        assert summary.best_score == summary.results[0].score
        assert str(job_spec.id) in analyst_cv.match_results
        assert str(job_spec.id) in chef_cv.match_results
        assert pending.match_results == {}

    @pytest.mark.asyncio
    async def test_empty_workspace(self, matching_service, workspace, job_spec):
        summary = await matching_service.batch_match(workspace, job_spec.id)

        assert summary.total == 0
        assert summary.average_score == 0
        assert summary.best_score == 0


class TestBatchMatchSummary:

    def test_average_rounds_half_up(self):
        results = [Mock(spec=MatchResult, score=score) for score in (70, 71)]

        summary = BatchMatchSummary(job_spec_id=JobSpecId.generate(), results=results)

        assert summary.average_score == 71
        assert summary.best_score == 71


# =============================================================================
# BREAKDOWN
# =============================================================================


class TestMatchBreakdown:

    @pytest.mark.asyncio
    async def test_returns_stored_result(self, matching_service, workspace, job_spec, analyst_cv):
        result = await matching_service.match_cv(workspace, job_spec.id, analyst_cv.id)

        stored = await matching_service.get_match_breakdown(workspace, job_spec.id, analyst_cv.id)

        assert stored.score == result.score

    @pytest.mark.asyncio
    async def test_not_matched_yet(self, matching_service, workspace, job_spec, analyst_cv):
        with pytest.raises(MatchResultNotFoundError):
            await matching_service.get_match_breakdown(workspace, job_spec.id, analyst_cv.id)
