"""Get Service Info Use Case

Retrieves the projection of a service.
"""

from libs.result import Result, Return, Error
from src.app.repositories.service_repository import ServiceRepository
from .dtos import ServiceInfoDTO


class GetServiceInfo:
    """
    Get Service Info Use Case

    Read-only operation returning id, group, current tarif, payday and
    paid_for of a service.
    """

    def __init__(self, service_repo: ServiceRepository):
        self.service_repo = service_repo

    async def execute(self, service_id: int) -> Result[ServiceInfoDTO]:
        """
        Execute get service info operation

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

        return Return.ok(ServiceInfoDTO(**service.info()))
