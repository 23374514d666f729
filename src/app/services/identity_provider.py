"""Identity Provider Interface

Defines the contract for verifying sign-in submissions.
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping
from src.domain.user import User


class AuthErrorType:
    """Discriminators carried by AuthError"""
    CREDENTIALS_SIGNIN = "CredentialsSignin"
    INVALID_PROVIDER = "InvalidProvider"


class AuthError(Exception):
    """
    Authentication-specific failure raised by an identity provider

    Attributes:
        type: Subtype discriminator (see AuthErrorType)
    """

    def __init__(self, type: str, message: str = ""):
        super().__init__(message or type)
        self.type = type


class IdentityProvider(ABC):
    """Verifies submitted credentials for a named strategy"""

    @abstractmethod
    async def sign_in(self, strategy: str, form_data: Mapping[str, Any]) -> User:
        """
        Verify a sign-in submission

        Args:
            strategy: Strategy name (e.g. "credentials")
            form_data: Raw submitted form fields

        Returns:
            The signed-in User

        Raises:
            AuthError: When the submission is rejected
        """
        pass
