"""User Repository Interface

Defines the contract for billing account persistence operations.
"""

from abc import ABC, abstractmethod
from typing import Optional
from src.domain.user import User


class UserRepository(ABC):
    """Repository interface for User persistence"""

    @abstractmethod
    async def get_by_id(self, user_id: int, for_update: bool = False) -> Optional[User]:
        """
        Retrieve user with its credit access

        Args:
            user_id: User ID
            for_update: If True, locks the row with SELECT FOR UPDATE

        Returns:
            User if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """
        Create a new user

        Args:
            user: User entity to persist

        Returns:
            Created User with generated ID
        """
        pass

    @abstractmethod
    async def update(self, user: User) -> User:
        """
        Persist the changes of a user and its credit access

        Args:
            user: User entity with updated values

        Returns:
            Updated User
        """
        pass
