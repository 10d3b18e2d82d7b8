"""List Available Tarifs Use Case

Lists the catalog tarifs a service may start with or switch to.
"""

from libs.result import Result, Return, Error
from src.app.repositories.service_repository import ServiceRepository
from src.app.repositories.tarif_repository import TarifRepository
from src.domain.policy import ServicePolicy
from .dtos import AvailableTarifsResponseDTO, TarifDTO


class ListAvailableTarifs:
    """
    List Available Tarifs Use Case

    The catalog is restricted to the policy's tarif groups; the service then
    keeps only the tarifs compatible with its current tarif and its group.
    """

    def __init__(
        self,
        service_repo: ServiceRepository,
        tarif_repo: TarifRepository,
        policy: ServicePolicy,
    ):
        self.service_repo = service_repo
        self.tarif_repo = tarif_repo
        self.policy = policy

    async def execute(self, service_id: int) -> Result[AvailableTarifsResponseDTO]:
        """
        Execute available tarifs lookup

        Errors:
            SERVICE_NOT_FOUND: No service with this ID
        """
        service = await self.service_repo.get_by_id(service_id)

        if not service:
            return Return.err(
                Error(
                    code="SERVICE_NOT_FOUND",
                    message=f"Service {service_id} not found",
                )
            )

        catalog = await self.tarif_repo.list_by_group_ids(self.policy.tarif_group_ids)
        available = service.show_available_tarifs(catalog)

        return Return.ok(
            AvailableTarifsResponseDTO(
                service_id=service.id,
                tarifs=[TarifDTO(**tarif.info()) for tarif in available],
            )
        )
