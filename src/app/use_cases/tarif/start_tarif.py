"""StartTarif Use Case

Activates a tarif on a dormant service, charging the full price of the first
period.
"""

import logging
from decimal import Decimal
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.service_repository import ServiceRepository
from src.app.repositories.tarif_repository import TarifRepository
from src.domain.clock import Clock
from src.domain.exceptions import DomainLogicException
from src.domain.policy import ServicePolicy
from .dtos import StartTarifCommandDTO, TarifOperationResponseDTO

logger = logging.getLogger(__name__)


class StartTarif:
    """
    Use Case: Start a tarif on a service

    Business Rules:
    1. Service must be inactive
    2. Tarif group must match the service group
    3. Tarif must be accepted by the current (inactive) tarif
    4. Balance is charged the tarif price; paid_for reflects the balance sign
    5. Pessimistic locking: SELECT FOR UPDATE on the service row

    Flow:
    1. Get service with lock
    2. Get tarif
    3. Apply the domain transition
    4. Flush and commit
    5. Return response
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

    async def execute(self, command: StartTarifCommandDTO) -> Result[TarifOperationResponseDTO]:
        """
        Execute tarif activation

        Args:
            command: StartTarifCommandDTO with service_id and tarif_id

        Returns:
            Result[TarifOperationResponseDTO]: Success with service state or error
        """
        try:
            # Step 1: Get service aggregate with pessimistic lock
            service = await self.service_repo.get_by_id(command.service_id, for_update=True)
            if not service:
                await self.uow.rollback()
                return Return.err(
                    Error(
                        code="SERVICE_NOT_FOUND",
                        message=f"Service {command.service_id} not found",
                    )
                )

            # Step 2: Get tarif
            tarif = await self.tarif_repo.get_by_id(command.tarif_id)
            if not tarif:
                await self.uow.rollback()
                return Return.err(
                    Error(
                        code="TARIF_NOT_FOUND",
                        message=f"Tarif {command.tarif_id} not found",
                    )
                )

            # Step 3: Domain transition (validates before mutating)
            service.start_tarif(tarif, self.policy, self.clock)

            # Step 4: Persist
            await self.service_repo.update(service)
            await self.uow.commit()

            logger.info(
                f"Started tarif {tarif.id} on service {service.id}, "
                f"payday={service.payday.isoformat()}, paid_for={service.paid_for}"
            )

            return Return.ok(
                TarifOperationResponseDTO.from_service(service, amount=Decimal(tarif.price))
            )

        except DomainLogicException as e:
            await self.uow.rollback()
            logger.warning(f"Start tarif rejected for service {command.service_id}: {e.message}")
            return Return.err(Error(code=e.code, message=e.message))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Start tarif failed for service {command.service_id}: {e}")
            return Return.err(
                Error(
                    code="START_TARIF_FAILED",
                    message="Failed to start tarif",
                    reason=str(e),
                )
            )
