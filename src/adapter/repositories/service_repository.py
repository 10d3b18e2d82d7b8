"""SQLAlchemy Service Repository Implementation

Loads and persists the service aggregate (service, user, credit access,
tarif) using SQLAlchemy async session.
"""

from typing import Optional
from sqlalchemy.orm import selectinload
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.service_repository import ServiceRepository
from src.domain.service import Service
from src.domain.user import User


class SqlAlchemyServiceRepository(ServiceRepository):
    """
    SQLAlchemy implementation of ServiceRepository

    Features:
    - Pessimistic locking via SELECT FOR UPDATE
    - Eager loading of the whole aggregate (safe for async sessions)
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, service_id: int, for_update: bool = False) -> Optional[Service]:
        """
        Retrieve service aggregate by ID with optional row-level locking

        Args:
            service_id: Service ID
            for_update: If True, locks the row with SELECT FOR UPDATE

        Returns:
            Service if found, None otherwise
        """
        stmt = (
            select(Service)
            .where(Service.id == service_id)
            .options(
                selectinload(Service.user).selectinload(User.credit_access),
                selectinload(Service.current_tarif),
            )
        )

        if for_update:
            stmt = stmt.with_for_update().execution_options(populate_existing=True)

        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def create(self, service: Service) -> Service:
        """
        Create a new service

        Args:
            service: Service entity to persist

        Returns:
            Created Service with generated ID
        """
        self.session.add(service)
        await self.session.flush()
        await self.session.refresh(service)
        return service

    async def update(self, service: Service) -> Service:
        """
        Flush the service together with its user and credit access

        Args:
            service: Service entity with updated values

        Returns:
            Updated Service

        Note:
            Should be called within a transaction with the service already locked
        """
        self.session.add(service)
        await self.session.flush()
        return service
