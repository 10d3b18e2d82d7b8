"""Service API Routes

FastAPI routes for the tarif lifecycle of a service.
"""

from typing import List
from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.schemas.tarif_request import StartTarifRequestSchema, ChangeTarifRequestSchema
from src.app.use_cases.tarif.dtos import (
    ServiceInfoDTO,
    TarifDTO,
    TarifOperationResponseDTO,
    StartTarifCommandDTO,
    StopTarifCommandDTO,
    ChangeTarifCommandDTO,
)
from src.app.use_cases.tarif.start_tarif import StartTarif
from src.app.use_cases.tarif.stop_tarif import StopTarif
from src.app.use_cases.tarif.change_tarif import ChangeTarif
from src.app.use_cases.tarif.get_service_info import GetServiceInfo
from src.app.use_cases.tarif.list_available_tarifs import ListAvailableTarifs
from src.adapter.repositories.service_repository import SqlAlchemyServiceRepository
from src.adapter.repositories.tarif_repository import SqlAlchemyTarifRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session, get_service_policy, get_clock
from src.domain.clock import Clock
from src.domain.policy import ServicePolicy
from src.api.error import ClientError, status_for

router = APIRouter(prefix="/services", tags=["Services"])

ERROR_RESPONSES = {
    404: {
        "description": "Service or tarif not found",
        "content": {
            "application/json": {
                "example": {
                    "error": {
                        "code": "SERVICE_NOT_FOUND",
                        "message": "Service 42 not found"
                    }
                }
            }
        }
    },
    409: {
        "description": "Tarif lifecycle rule violated",
        "content": {
            "application/json": {
                "example": {
                    "error": {
                        "code": "TARIF_ALREADY_ACTIVE",
                        "message": "The service with serviceId = 42 already has a tarif."
                    }
                }
            }
        }
    },
}


@router.get(
    "/{service_id}",
    response_model=ServiceInfoDTO,
    status_code=status.HTTP_200_OK,
    responses={404: ERROR_RESPONSES[404]},
)
async def get_service(
    service_id: int,
    session: AsyncSession = Depends(get_session),
):
    """
    Get the current state of a service.

    **Returns:**
    - 200: id, group_id, tarif_info, payday (YYYY-MM-DD), paid_for
    - 404: Service not found
    """
    use_case = GetServiceInfo(SqlAlchemyServiceRepository(session))
    result = await use_case.execute(service_id)

    if result.is_err():
        raise ClientError(result.error, status_code=status_for(result.error))

    return result.value


@router.post(
    "/{service_id}/tarif/start",
    response_model=TarifOperationResponseDTO,
    status_code=status.HTTP_200_OK,
    responses=ERROR_RESPONSES,
)
async def start_tarif(
    service_id: int,
    request: StartTarifRequestSchema,
    session: AsyncSession = Depends(get_session),
    policy: ServicePolicy = Depends(get_service_policy),
    clock: Clock = Depends(get_clock),
):
    """
    Activate a tarif on a dormant service.

    The full tarif price is charged. `paid_for` is true when the balance
    stays non-negative.

    **Returns:**
    - 200: Tarif started
    - 404: Service or tarif not found
    - 409: Service already active, group mismatch or incompatible tarif
    """
    use_case = StartTarif(
        uow=SqlAlchemyUnitOfWork(session),
        service_repo=SqlAlchemyServiceRepository(session),
        tarif_repo=SqlAlchemyTarifRepository(session),
        policy=policy,
        clock=clock,
    )
    result = await use_case.execute(
        StartTarifCommandDTO(service_id=service_id, tarif_id=request.tarif_id)
    )

    if result.is_err():
        raise ClientError(result.error, status_code=status_for(result.error))

    return result.value


@router.post(
    "/{service_id}/tarif/stop",
    response_model=TarifOperationResponseDTO,
    status_code=status.HTTP_200_OK,
    responses=ERROR_RESPONSES,
)
async def stop_tarif(
    service_id: int,
    session: AsyncSession = Depends(get_session),
    clock: Clock = Depends(get_clock),
):
    """
    Deactivate the tarif of a service.

    `amount` in the response is the settlement added to the balance.

    **Returns:**
    - 200: Tarif stopped
    - 404: Service not found
    - 409: Service has no tarif
    """
    use_case = StopTarif(
        uow=SqlAlchemyUnitOfWork(session),
        service_repo=SqlAlchemyServiceRepository(session),
        clock=clock,
    )
    result = await use_case.execute(StopTarifCommandDTO(service_id=service_id))

    if result.is_err():
        raise ClientError(result.error, status_code=status_for(result.error))

    return result.value


@router.post(
    "/{service_id}/tarif/change",
    response_model=TarifOperationResponseDTO,
    status_code=status.HTTP_200_OK,
    responses=ERROR_RESPONSES,
)
async def change_tarif(
    service_id: int,
    request: ChangeTarifRequestSchema,
    session: AsyncSession = Depends(get_session),
    policy: ServicePolicy = Depends(get_service_policy),
    clock: Clock = Depends(get_clock),
):
    """
    Switch an active service to another tarif.

    `amount` in the response is the charged price difference (negative when
    the account was credited).

    **Returns:**
    - 200: Tarif changed
    - 404: Service or tarif not found
    - 409: Service has no tarif, group mismatch or incompatible tarif
    """
    use_case = ChangeTarif(
        uow=SqlAlchemyUnitOfWork(session),
        service_repo=SqlAlchemyServiceRepository(session),
        tarif_repo=SqlAlchemyTarifRepository(session),
        policy=policy,
        clock=clock,
    )
    result = await use_case.execute(
        ChangeTarifCommandDTO(service_id=service_id, tarif_id=request.tarif_id)
    )

    if result.is_err():
        raise ClientError(result.error, status_code=status_for(result.error))

    return result.value


@router.get(
    "/{service_id}/tarifs/available",
    response_model=List[TarifDTO],
    status_code=status.HTTP_200_OK,
    responses={404: ERROR_RESPONSES[404]},
)
async def list_available_tarifs(
    service_id: int,
    session: AsyncSession = Depends(get_session),
    policy: ServicePolicy = Depends(get_service_policy),
):
    """
    List the catalog tarifs the service can start with or switch to.

    **Returns:**
    - 200: List of tarifs
    - 404: Service not found
    """
    use_case = ListAvailableTarifs(
        service_repo=SqlAlchemyServiceRepository(session),
        tarif_repo=SqlAlchemyTarifRepository(session),
        policy=policy,
    )
    result = await use_case.execute(service_id)

    if result.is_err():
        raise ClientError(result.error, status_code=status_for(result.error))

    return result.value.tarifs
