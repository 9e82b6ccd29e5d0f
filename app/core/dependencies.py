"""
FastAPI Dependencies
"""

from typing import Annotated, Optional

import structlog
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.api.dependencies import (
    AccountServiceDep,
    TeamServiceDep,
    map_domain_exception_to_http,
)
from app.application.workspace import CurrentUser, WorkspaceContext
from app.core.config import Settings, get_settings
from app.domain.exceptions import DomainException
from app.database.sqlmodel_engine import SQLModelDatabaseManager
from app.infrastructure.providers.database_provider import get_database_manager
from app.utils.security import TokenManager

logger = structlog.get_logger(__name__)

# Security scheme
security = HTTPBearer(auto_error=False)


# Settings dependency
def get_settings_dependency() -> Settings:
    """Get application settings"""
    return get_settings()


def get_token_manager() -> TokenManager:
    """Get the JWT token manager"""
    return TokenManager()


# Database dependencies
async def get_database_manager_dependency() -> SQLModelDatabaseManager:
    """Get the initialised database manager"""
    return await get_database_manager()


# Authentication dependencies
async def get_current_user_optional(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    token_manager: TokenManager = Depends(get_token_manager),
) -> Optional[CurrentUser]:
    """Get current user from token (optional)"""
    if not credentials:
        return None

    payload = token_manager.verify_token(credentials.credentials)
    if not payload:
        return None
    return token_manager.token_to_current_user(payload)


async def get_current_user(
    account_service: AccountServiceDep,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    token_manager: TokenManager = Depends(get_token_manager),
) -> CurrentUser:
    """Get current authenticated user and keep their account row in sync"""
    if not credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )

    payload = token_manager.verify_token(credentials.credentials)
    user = token_manager.token_to_current_user(payload) if payload else None
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        await account_service.sync_account(user)
    except DomainException as e:
        raise map_domain_exception_to_http(e)

    return user


async def get_workspace_context(
    team_service: TeamServiceDep,
    current_user: CurrentUser = Depends(get_current_user),
) -> WorkspaceContext:
    """Resolve the workspace the current user acts in"""
    try:
        return await team_service.resolve_workspace(current_user)
    except DomainException as e:
        raise map_domain_exception_to_http(e)
    except Exception as e:
        logger.error("Failed to resolve workspace", user_id=str(current_user.user_id), error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to resolve workspace"
        )


# Type aliases for cleaner code
CurrentUserDep = Annotated[CurrentUser, Depends(get_current_user)]
OptionalCurrentUser = Annotated[Optional[CurrentUser], Depends(get_current_user_optional)]
WorkspaceDep = Annotated[WorkspaceContext, Depends(get_workspace_context)]
DatabaseManagerDep = Annotated[SQLModelDatabaseManager, Depends(get_database_manager_dependency)]
