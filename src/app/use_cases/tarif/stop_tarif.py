"""StopTarif Use Case

Deactivates the tarif of a service and settles the current period.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.service_repository import ServiceRepository
from src.domain.clock import Clock
from src.domain.exceptions import DomainLogicException
from .dtos import StopTarifCommandDTO, TarifOperationResponseDTO

logger = logging.getLogger(__name__)


class StopTarif:
    """
    Use Case: Stop the tarif of a service

    Business Rules:
    1. Service must be active
    2. Paid period: unused part refunded at the base daily rate, never below 0
    3. Unpaid period covered by credit access: price minus credit days
       (may be negative)
    4. Unpaid period without credit access: full price returned, period unwound
    """

    def __init__(
        self,
        uow: UnitOfWork,
        service_repo: ServiceRepository,
        clock: Clock,
    ):
        self.uow = uow
        self.service_repo = service_repo
        self.clock = clock

    async def execute(self, command: StopTarifCommandDTO) -> Result[TarifOperationResponseDTO]:
        """
        Execute tarif deactivation

        Args:
            command: StopTarifCommandDTO with service_id

        Returns:
            Result[TarifOperationResponseDTO]: Success with settlement or error
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

            settlement = service.stop_tarif(self.clock)

            await self.service_repo.update(service)
            await self.uow.commit()

            logger.info(
                f"Stopped tarif on service {service.id}, settlement={settlement}, "
                f"payday={service.payday.isoformat()}"
            )

            return Return.ok(TarifOperationResponseDTO.from_service(service, amount=settlement))

        except DomainLogicException as e:
            await self.uow.rollback()
            logger.warning(f"Stop tarif rejected for service {command.service_id}: {e.message}")
            return Return.err(Error(code=e.code, message=e.message))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Stop tarif failed for service {command.service_id}: {e}")
            return Return.err(
                Error(
                    code="STOP_TARIF_FAILED",
                    message="Failed to stop tarif",
                    reason=str(e),
                )
            )
