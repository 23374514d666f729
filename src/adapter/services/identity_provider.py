"""Identity Provider Implementations

Verifies email/password submissions against the users table.
"""

import logging
from typing import Any, Mapping
from pydantic import BaseModel, Field, ValidationError
from werkzeug.security import check_password_hash
from src.app.repositories.user_repository import UserRepository
from src.app.services.identity_provider import AuthError, AuthErrorType, IdentityProvider
from src.domain.user import User

logger = logging.getLogger(__name__)


class CredentialsPayload(BaseModel):
    """Shape of a credentials sign-in submission"""

    email: str = Field(..., pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
    password: str = Field(..., min_length=6)


class CredentialsIdentityProvider(IdentityProvider):
    """
    Identity provider supporting the "credentials" strategy

    Every rejection (malformed payload, unknown email, wrong password) is
    reported as CredentialsSignin so callers cannot tell them apart.
    """

    STRATEGY = "credentials"

    def __init__(self, user_repo: UserRepository):
        self.user_repo = user_repo

    async def sign_in(self, strategy: str, form_data: Mapping[str, Any]) -> User:
        if strategy != self.STRATEGY:
            raise AuthError(AuthErrorType.INVALID_PROVIDER, f"Unsupported strategy: {strategy}")

        try:
            payload = CredentialsPayload(
                email=form_data.get("email"),
                password=form_data.get("password"),
            )
        except ValidationError:
            raise AuthError(AuthErrorType.CREDENTIALS_SIGNIN, "Malformed credentials")

        user = await self.user_repo.get_by_email(payload.email)
        if user is None or not check_password_hash(user.password, payload.password):
            logger.info(f"Rejected sign-in for {payload.email}")
            raise AuthError(AuthErrorType.CREDENTIALS_SIGNIN, "Invalid email or password")

        return user
