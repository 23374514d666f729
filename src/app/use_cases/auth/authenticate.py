"""Authenticate Use Case

Signs a user in with the credentials strategy and maps provider
rejections to the messages shown on the login form.
"""

import logging
from typing import Any, Mapping, Optional
from src.app.services.identity_provider import AuthError, AuthErrorType, IdentityProvider

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials."
SOMETHING_WENT_WRONG = "Something went wrong."


class Authenticate:
    """
    Use Case: Sign in with email and password

    Only AuthError is translated. Any other exception raised by the
    provider (database down, misconfiguration) is re-raised as is.
    """

    STRATEGY = "credentials"

    def __init__(self, identity_provider: IdentityProvider):
        self.identity_provider = identity_provider

    async def execute(self, form_data: Mapping[str, Any]) -> Optional[str]:
        """
        Execute sign-in

        Args:
            form_data: Raw login form fields

        Returns:
            None on success, otherwise the message to show on the form
        """
        try:
            await self.identity_provider.sign_in(self.STRATEGY, form_data)
        except AuthError as error:
            logger.warning(f"Sign-in rejected: {error.type}")
            if error.type == AuthErrorType.CREDENTIALS_SIGNIN:
                return INVALID_CREDENTIALS
            return SOMETHING_WENT_WRONG
        return None
