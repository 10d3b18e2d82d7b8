"""SQLAlchemy User Repository Implementation

Provides persistence for User entities with pessimistic locking support.
"""

from typing import Optional
from sqlalchemy.orm import selectinload
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.user_repository import UserRepository
from src.domain.user import User


class SqlAlchemyUserRepository(UserRepository):
    """SQLAlchemy implementation of UserRepository"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, user_id: int, for_update: bool = False) -> Optional[User]:
        """
        Retrieve user by ID with optional row-level locking

        Args:
            user_id: User ID
            for_update: If True, locks the row with SELECT FOR UPDATE

        Returns:
            User if found, None otherwise
        """
        stmt = (
            select(User)
            .where(User.id == user_id)
            .options(selectinload(User.credit_access))
        )

        if for_update:
            stmt = stmt.with_for_update().execution_options(populate_existing=True)

        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def create(self, user: User) -> User:
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user

    async def update(self, user: User) -> User:
        self.session.add(user)
        await self.session.flush()
        return user
