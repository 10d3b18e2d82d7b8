"""User API Routes

FastAPI routes for deferred-payment (credit access) handling.
"""

from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.use_cases.tarif.dtos import CreditAccessResponseDTO, TakeCreditAccessCommandDTO
from src.app.use_cases.tarif.take_credit_access import TakeCreditAccess
from src.adapter.repositories.user_repository import SqlAlchemyUserRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session, get_service_policy, get_clock
from src.domain.clock import Clock
from src.domain.policy import ServicePolicy
from src.api.error import ClientError, status_for

router = APIRouter(prefix="/users", tags=["Users"])


@router.post(
    "/{user_id}/credit-access",
    response_model=CreditAccessResponseDTO,
    status_code=status.HTTP_200_OK,
    responses={
        404: {"description": "User not found"},
        409: {
            "description": "Credit access cannot be taken",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "CREDIT_ACCESS_UNAVAILABLE",
                            "message": "User 7 has a non-negative balance and needs no credit access."
                        }
                    }
                }
            }
        },
    },
)
async def take_credit_access(
    user_id: int,
    session: AsyncSession = Depends(get_session),
    policy: ServicePolicy = Depends(get_service_policy),
    clock: Clock = Depends(get_clock),
):
    """
    Grant a deferred-payment window to a user in debt.

    **Returns:**
    - 200: Window granted, access restored
    - 404: User not found
    - 409: Balance not negative or a window is still running
    """
    use_case = TakeCreditAccess(
        uow=SqlAlchemyUnitOfWork(session),
        user_repo=SqlAlchemyUserRepository(session),
        policy=policy,
        clock=clock,
    )
    result = await use_case.execute(TakeCreditAccessCommandDTO(user_id=user_id))

    if result.is_err():
        raise ClientError(result.error, status_code=status_for(result.error))

    return result.value
