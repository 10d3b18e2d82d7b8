"""TakeCreditAccess Use Case

Grants a user a deferred-payment window so access continues while the
balance is negative.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.user_repository import UserRepository
from src.domain.clock import Clock
from src.domain.exceptions import DomainLogicException
from src.domain.policy import ServicePolicy
from .dtos import TakeCreditAccessCommandDTO, CreditAccessResponseDTO

logger = logging.getLogger(__name__)


class TakeCreditAccess:
    """
    Use Case: Take credit access

    Business Rules:
    1. Only users with a negative balance may take credit access
    2. A new window cannot start while the previous one is running
    3. Window length comes from the policy (credit_access_days)
    4. access_granted is recomputed
    """

    def __init__(
        self,
        uow: UnitOfWork,
        user_repo: UserRepository,
        policy: ServicePolicy,
        clock: Clock,
    ):
        self.uow = uow
        self.user_repo = user_repo
        self.policy = policy
        self.clock = clock

    async def execute(self, command: TakeCreditAccessCommandDTO) -> Result[CreditAccessResponseDTO]:
        try:
            user = await self.user_repo.get_by_id(command.user_id, for_update=True)
            if not user:
                await self.uow.rollback()
                return Return.err(
                    Error(
                        code="USER_NOT_FOUND",
                        message=f"User {command.user_id} not found",
                    )
                )

            credit_access = user.take_credit_access(
                self.clock.now(), self.policy.credit_access_days
            )

            await self.user_repo.update(user)
            await self.uow.commit()

            logger.info(
                f"Granted credit access to user {user.id} until "
                f"{credit_access.active_until.isoformat()}"
            )

            return Return.ok(
                CreditAccessResponseDTO(
                    user_id=user.id,
                    taken_at=credit_access.taken_at,
                    active_until=credit_access.active_until,
                    balance=user.balance,
                    access_granted=user.access_granted,
                )
            )

        except DomainLogicException as e:
            await self.uow.rollback()
            logger.warning(f"Credit access rejected for user {command.user_id}: {e.message}")
            return Return.err(Error(code=e.code, message=e.message))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Credit access failed for user {command.user_id}: {e}")
            return Return.err(
                Error(
                    code="TAKE_CREDIT_ACCESS_FAILED",
                    message="Failed to take credit access",
                    reason=str(e),
                )
            )
