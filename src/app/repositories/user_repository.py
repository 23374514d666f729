"""User Repository Interface"""

from abc import ABC, abstractmethod
from typing import Optional
from src.domain.user import User


class UserRepository(ABC):
    """Repository interface for dashboard users"""

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """
        Retrieve user by sign-in email

        Args:
            email: Email address

        Returns:
            User if found, None otherwise
        """
        pass
