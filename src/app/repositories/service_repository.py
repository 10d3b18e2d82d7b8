"""Service Repository Interface

Defines the contract for service (subscription) persistence operations.
"""

from abc import ABC, abstractmethod
from typing import Optional
from src.domain.service import Service


class ServiceRepository(ABC):
    """
    Repository interface for Service persistence

    A service is always loaded as a whole aggregate: with its user, the
    user's credit access and the current tarif.
    """

    @abstractmethod
    async def get_by_id(self, service_id: int, for_update: bool = False) -> Optional[Service]:
        """
        Retrieve service aggregate by ID

        Args:
            service_id: Service ID
            for_update: If True, locks the row with SELECT FOR UPDATE

        Returns:
            Service if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, service: Service) -> Service:
        """
        Create a new service

        Args:
            service: Service entity to persist

        Returns:
            Created Service with generated ID
        """
        pass

    @abstractmethod
    async def update(self, service: Service) -> Service:
        """
        Persist the changes of a service aggregate

        Args:
            service: Service entity with updated values

        Returns:
            Updated Service
        """
        pass
