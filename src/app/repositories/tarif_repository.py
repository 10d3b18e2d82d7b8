"""Tarif Repository Interface

Defines the contract for tarif catalog lookups.
"""

from abc import ABC, abstractmethod
from typing import Iterable, List, Optional
from src.domain.tarif import Tarif


class TarifRepository(ABC):
    """Repository interface for Tarif persistence"""

    @abstractmethod
    async def get_by_id(self, tarif_id: int) -> Optional[Tarif]:
        """
        Retrieve tarif by ID

        Args:
            tarif_id: Tarif ID

        Returns:
            Tarif if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_by_group_ids(self, group_ids: Iterable[int]) -> List[Tarif]:
        """
        Retrieve all tarifs of the given groups, ordered by ID

        Args:
            group_ids: Group classifiers offered in the catalog

        Returns:
            List of tarifs
        """
        pass

    @abstractmethod
    async def create(self, tarif: Tarif) -> Tarif:
        """
        Create a new tarif

        Args:
            tarif: Tarif entity to persist

        Returns:
            Created Tarif with generated ID
        """
        pass
