"""ChangeTarif Use Case

Switches an active service to another tarif of the same group, charging or
crediting the price difference.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.service_repository import ServiceRepository
from src.app.repositories.tarif_repository import TarifRepository
from src.domain.clock import Clock
from src.domain.exceptions import DomainLogicException
from src.domain.policy import ServicePolicy
from .dtos import ChangeTarifCommandDTO, TarifOperationResponseDTO

logger = logging.getLogger(__name__)


class ChangeTarif:
    """
    Use Case: Change the tarif of a service

    Business Rules:
    1. Service must be active
    2. Tarif group must match; current tarif must accept the new one
    3. Charge = daily rate delta over the days left + new daily rate over
       the pay period length delta
    4. Payday moves by the pay period length delta
    """

    def __init__(
        self,
        uow: UnitOfWork,
        service_repo: ServiceRepository,
        tarif_repo: TarifRepository,
        policy: ServicePolicy,
        clock: Clock,
    ):
        self.uow = uow
        self.service_repo = service_repo
        self.tarif_repo = tarif_repo
        self.policy = policy
        self.clock = clock

    async def execute(self, command: ChangeTarifCommandDTO) -> Result[TarifOperationResponseDTO]:
        """
        Execute tarif change

        Args:
            command: ChangeTarifCommandDTO with service_id and tarif_id

        Returns:
            Result[TarifOperationResponseDTO]: Success with charged amount or error
        """
        try:
            service = await self.service_repo.get_by_id(command.service_id, for_update=True)
            if not service:
                await self.uow.rollback()
                return Return.err(
                    Error(
                        code="SERVICE_NOT_FOUND",
                        message=f"Service {command.service_id} not found",
                    )
                )

            tarif = await self.tarif_repo.get_by_id(command.tarif_id)
            if not tarif:
                await self.uow.rollback()
                return Return.err(
                    Error(
                        code="TARIF_NOT_FOUND",
                        message=f"Tarif {command.tarif_id} not found",
                    )
                )

            old_tarif_id = service.tarif_id
            change = service.change_tarif(tarif, self.policy, self.clock)

            await self.service_repo.update(service)
            await self.uow.commit()

            logger.info(
                f"Changed tarif on service {service.id} from {old_tarif_id} to {tarif.id}, "
                f"charged={change}, payday={service.payday.isoformat()}"
            )

            return Return.ok(TarifOperationResponseDTO.from_service(service, amount=change))

        except DomainLogicException as e:
            await self.uow.rollback()
            logger.warning(f"Change tarif rejected for service {command.service_id}: {e.message}")
            return Return.err(Error(code=e.code, message=e.message))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Change tarif failed for service {command.service_id}: {e}")
            return Return.err(
                Error(
                    code="CHANGE_TARIF_FAILED",
                    message="Failed to change tarif",
                    reason=str(e),
                )
            )
