"""
Security utilities for bearer token handling
"""

import jwt
from datetime import datetime, timedelta, timezone
from typing import Dict, Any, Optional
from uuid import uuid4

import structlog
from app.core.config import get_settings
from app.application.workspace import CurrentUser
from app.domain.plans import resolve_plan
from app.domain.value_objects import UserId

logger = structlog.get_logger(__name__)


class TokenManager:
    """JWT token management utilities.

    Tokens are issued by the identity provider in front of the API; this class
    verifies them and can mint equivalent tokens for local development.
    """

    def __init__(self):
        self.settings = get_settings()

    def create_access_token(
        self,
        user_id: str,
        email: str,
        name: Optional[str] = None,
        plan: str = "free",
        extra_claims: Optional[Dict[str, Any]] = None
    ) -> str:
        """Create JWT access token"""

        now = datetime.now(timezone.utc)
        expires_at = now + timedelta(minutes=self.settings.ACCESS_TOKEN_EXPIRE_MINUTES)

        payload = {
            "sub": str(user_id),
            "email": email,
            "name": name,
            "plan": plan,
            "exp": expires_at,
            "iat": now,
            "jti": str(uuid4()),
        }

        if extra_claims:
            payload.update(extra_claims)

        return jwt.encode(
            payload,
            self.settings.SECRET_KEY,
            algorithm=self.settings.JWT_ALGORITHM
        )

    def verify_token(self, token: str) -> Optional[Dict[str, Any]]:
        """Verify and decode JWT token"""
        try:
            return jwt.decode(
                token,
                self.settings.SECRET_KEY,
                algorithms=[self.settings.JWT_ALGORITHM]
            )
        except jwt.ExpiredSignatureError:
            logger.warning("Token has expired")
            return None
        except jwt.PyJWTError as e:
            logger.warning("Token validation failed", error=str(e))
            return None

    def token_to_current_user(self, payload: Dict[str, Any]) -> Optional[CurrentUser]:
        """Convert verified claims to CurrentUser"""
        try:
            user_id = UserId(payload["sub"])
            email = payload["email"]
        except KeyError as e:
            logger.error("Missing required token field", field=str(e))
            return None
        except (TypeError, ValueError) as e:
            logger.error("Invalid subject claim", error=str(e))
            return None

        if not email:
            logger.error("Missing required token field", field="email")
            return None

        return CurrentUser(
            user_id=user_id,
            email=str(email).strip().lower(),
            display_name=payload.get("name") or None,
            plan=resolve_plan(payload.get("plan")),
        )


__all__ = ["TokenManager"]
