"""
Team Collaboration API Endpoints

Owners invite colleagues into their workspace; members share the owner's
CVs, job specs and plan.
"""

from typing import List

import structlog
from fastapi import APIRouter, HTTPException, Path, status

from app.api.dependencies import TeamServiceDep, map_domain_exception_to_http
from app.api.schemas.base import DeletionResponse
from app.api.schemas.team_schemas import (
    InviteCreate,
    InviteDetailsResponse,
    InviteResponse,
    RoleUpdate,
    TeamAccessResponse,
    TeamMemberResponse,
    TeamRosterResponse,
)
from app.core.dependencies import CurrentUserDep, WorkspaceDep
from app.domain.exceptions import DomainException
from app.domain.value_objects import TeamInviteId, TeamMemberId

logger = structlog.get_logger(__name__)
router = APIRouter(prefix="/teams", tags=["teams"])


def _parse_invite_id(invite_id: str) -> TeamInviteId:
    try:
        return TeamInviteId(invite_id)
    except (TypeError, ValueError):
        raise HTTPException(status_code=404, detail="Invitation not found")


def _parse_member_id(member_id: str) -> TeamMemberId:
    try:
        return TeamMemberId(member_id)
    except (TypeError, ValueError):
        raise HTTPException(status_code=404, detail="Team member not found")


@router.get("/members", response_model=TeamRosterResponse)
async def list_members(
    workspace: WorkspaceDep,
    team_service: TeamServiceDep,
) -> TeamRosterResponse:
    """The workspace owner and every member."""
    try:
        roster = await team_service.list_members(workspace)
        return TeamRosterResponse.from_roster(roster)
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)


@router.get("/access", response_model=TeamAccessResponse)
async def check_team_access(
    current_user: CurrentUserDep,
    team_service: TeamServiceDep,
) -> TeamAccessResponse:
    """Which workspace the caller acts in, and with which role and plan."""
    try:
        workspace = await team_service.check_team_access(current_user)
        return TeamAccessResponse.from_workspace(workspace)
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)


@router.post("/invites", response_model=InviteResponse, status_code=status.HTTP_201_CREATED)
async def send_invite(
    body: InviteCreate,
    workspace: WorkspaceDep,
    team_service: TeamServiceDep,
) -> InviteResponse:
    """
    Invite a colleague by email.

    Only the team owner may invite, on a plan with team collaboration and
    while the team has room.
    """
    try:
        invite = await team_service.send_invite(workspace, body.email, body.role)
        return InviteResponse.from_entity(invite)
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)
    except Exception as e:
        logger.error("Failed to send invite", owner_id=str(workspace.owner_id), error=str(e))
        raise HTTPException(status_code=500, detail="Failed to send invitation")


@router.get("/invites", response_model=List[InviteResponse])
async def list_pending_invites(
    workspace: WorkspaceDep,
    team_service: TeamServiceDep,
) -> List[InviteResponse]:
    try:
        invites = await team_service.list_pending_invites(workspace)
        return [InviteResponse.from_entity(invite) for invite in invites]
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)


@router.get("/invites/{invite_id}", response_model=InviteDetailsResponse)
async def get_invite(
    current_user: CurrentUserDep,
    team_service: TeamServiceDep,
    invite_id: str = Path(..., description="Invitation identifier"),
) -> InviteDetailsResponse:
    """Invitation details shown on the accept page."""
    try:
        details = await team_service.get_invite(_parse_invite_id(invite_id))
        return InviteDetailsResponse.from_details(details)
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)


@router.post("/invites/{invite_id}/accept", response_model=TeamMemberResponse)
async def accept_invite(
    current_user: CurrentUserDep,
    team_service: TeamServiceDep,
    invite_id: str = Path(..., description="Invitation identifier"),
) -> TeamMemberResponse:
    try:
        member = await team_service.accept_invite(current_user, _parse_invite_id(invite_id))
        return TeamMemberResponse.from_entity(member)
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)


@router.delete("/invites/{invite_id}", response_model=InviteResponse)
async def cancel_invite(
    workspace: WorkspaceDep,
    team_service: TeamServiceDep,
    invite_id: str = Path(..., description="Invitation identifier"),
) -> InviteResponse:
    try:
        invite = await team_service.cancel_invite(workspace, _parse_invite_id(invite_id))
        return InviteResponse.from_entity(invite)
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)


@router.delete("/members/{member_id}", response_model=DeletionResponse)
async def remove_member(
    workspace: WorkspaceDep,
    team_service: TeamServiceDep,
    member_id: str = Path(..., description="Team member identifier"),
) -> DeletionResponse:
    try:
        await team_service.remove_member(workspace, _parse_member_id(member_id))
        return DeletionResponse(message="Team member removed", deleted_id=member_id)
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)


@router.patch("/members/{member_id}/role", response_model=TeamMemberResponse)
async def update_member_role(
    body: RoleUpdate,
    workspace: WorkspaceDep,
    team_service: TeamServiceDep,
    member_id: str = Path(..., description="Team member identifier"),
) -> TeamMemberResponse:
    try:
        member = await team_service.update_member_role(workspace, _parse_member_id(member_id), body.role)
        return TeamMemberResponse.from_entity(member)
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)
