"""Service Domain Entity

Subscription of a user to a tarif. Holds the tarif lifecycle state machine:
start, stop and change of a tarif with prorated charges and refunds.
"""

from datetime import date, datetime, time, timedelta
from decimal import Decimal
from typing import Any, Dict, Iterable, List, Optional
from sqlmodel import Field, Column, Index, Relationship
from sqlalchemy import ForeignKey, Integer, Date
from src.domain.base import BaseModel
from src.domain.balance import quantize_money
from src.domain.clock import Clock
from src.domain.exceptions import (
    TarifAlreadyActiveError,
    TarifGroupMismatchError,
    TarifNotActiveError,
)
from src.domain.pay_period import add_months, skip_forbidden_day, subtract_months
from src.domain.policy import ServicePolicy
from src.domain.tarif import Tarif
from src.domain.user import User


class Service(BaseModel, table=True):
    """
    Service - Subscription of a user to a tarif

    States:
    - Inactive: no tarif (tarif_id is NULL, tarif is the inactive sentinel)
    - Active: a concrete tarif, paid_for true or false

    Domain Rules:
    - group_id never changes; only tarifs of the same group can be attached
    - payday is the end of the current period
    - paid_for is true iff the balance was non-negative after the last charge
    - Every check runs before any mutation
    """

    __tablename__ = "services"
    __table_args__ = (
        Index('ix_services_user_id', 'user_id'),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(Integer, primary_key=True, autoincrement=True),
        description="Unique service identifier (auto-increment)"
    )

    user_id: Optional[int] = Field(
        default=None,
        sa_column=Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        description="Foreign key to User"
    )

    group_id: int = Field(
        description="Group classifier (immutable)"
    )

    tarif_id: Optional[int] = Field(
        default=None,
        sa_column=Column(Integer, ForeignKey("tarifs.id"), nullable=True),
        description="Foreign key to the active Tarif (None = inactive)"
    )

    payday: date = Field(
        sa_column=Column(Date, nullable=False),
        description="End of the current pay period"
    )

    paid_for: bool = Field(
        default=False,
        description="Whether the current period is paid"
    )

    user: Optional[User] = Relationship(
        sa_relationship_kwargs={"lazy": "selectin"}
    )

    current_tarif: Optional[Tarif] = Relationship(
        sa_relationship_kwargs={"lazy": "selectin"}
    )

    @property
    def tarif(self) -> Tarif:
        if self.current_tarif is None:
            return Tarif.inactive_tarif()
        return self.current_tarif

    def _assign_tarif(self, tarif: Tarif) -> None:
        if tarif.is_inactive():
            self.current_tarif = None
            self.tarif_id = None
        else:
            self.current_tarif = tarif
            self.tarif_id = tarif.id

    def is_active(self) -> bool:
        return not self.tarif.is_inactive()

    def _group_ids_match(self, tarif: Tarif) -> bool:
        return self.group_id == tarif.group_id

    def _check_group(self, tarif: Tarif) -> None:
        if not self._group_ids_match(tarif):
            raise TarifGroupMismatchError(
                f"Tarif {tarif.id} (group {tarif.group_id}) cannot be set at "
                f"service {self.id} (group {self.group_id}).",
                service_id=self.id,
            )

    # Start

    def start_tarif(self, new_tarif: Tarif, policy: ServicePolicy, clock: Clock) -> None:
        """
        Activate new_tarif on a dormant service

        Charges the full price, marks the period paid if the balance stays
        non-negative and schedules the next payday.

        Raises:
            TarifAlreadyActiveError: service already has a tarif
            TarifGroupMismatchError: tarif belongs to another group
            IncompatibleTarifError: tarif rejected by the current tarif
        """
        if self.is_active():
            raise TarifAlreadyActiveError(
                f"The service with serviceId = {self.id} already has a tarif.",
                service_id=self.id,
            )
        self._check_group(new_tarif)
        self.tarif.compare_with_new(new_tarif)

        paid_for = self.user.subtract_from_balance(new_tarif.price).is_positive()

        if self._long_inactive(policy, clock):
            anchor = clock.today()
        else:
            anchor = self.payday
        payday = add_months(
            skip_forbidden_day(anchor, policy.forbidden_days),
            new_tarif.pay_period_months,
        )

        self.payday = payday
        self.paid_for = paid_for
        self._assign_tarif(new_tarif)

        self.user.update_access_granted(clock.now())

    def _long_inactive(self, policy: ServicePolicy, clock: Clock) -> bool:
        latency_edge = clock.today() - timedelta(days=policy.latency_period_days)
        return latency_edge > self.payday

    # Stop

    def stop_tarif(self, clock: Clock) -> Decimal:
        """
        Deactivate the current tarif

        Returns the settlement added to the balance (negative means an extra
        charge for credit days beyond the plan price).

        Raises:
            TarifNotActiveError: service has no tarif
        """
        if not self.is_active():
            raise TarifNotActiveError(
                f"The service with serviceId = {self.id} does not have a tarif.",
                service_id=self.id,
            )

        settlement = self.calculate_change_for_stop(clock)
        payday = self._new_payday(clock)

        self.user.add_to_balance(settlement)

        self.payday = payday
        self.paid_for = False
        self._assign_tarif(Tarif.inactive_tarif())

        self.user.update_access_granted(clock.now())
        return settlement

    def _period_start(self) -> date:
        return subtract_months(self.payday, self.tarif.pay_period_months)

    def calculate_change_for_stop(self, clock: Clock) -> Decimal:
        tarif = self.tarif
        price = Decimal(tarif.price)

        if self.paid_for:
            # TODO: refund the days left instead of charging the days used,
            # e.g. started 27.04, stopped 17.05 gives days_used = 20
            days_used = abs((clock.tomorrow() - self._period_start()).days)
            change = quantize_money(price - tarif.base_price_per_day * days_used)
            return change if change > 0 else quantize_money(0)

        if self.credit_access_was_used(clock):
            days_used = self.user.credit_access.days_used(clock.now())
            return quantize_money(price - tarif.base_price_per_day * days_used)

        return quantize_money(price)

    def credit_access_was_used(self, clock: Clock) -> bool:
        credit_access = self.user.credit_access
        if credit_access is None or credit_access.active_until is None:
            return False
        period_start = datetime.combine(self._period_start(), time.min)
        return (
            not credit_access.can_take(clock.now())
            and period_start < credit_access.active_until
        )

    def _new_payday(self, clock: Clock) -> date:
        if self.paid_for or self.credit_access_was_used(clock):
            return clock.tomorrow()
        # nothing paid and no credit taken: unwind the whole period
        return self._period_start()

    # Change

    def change_tarif(self, new_tarif: Tarif, policy: ServicePolicy, clock: Clock) -> Decimal:
        """
        Switch an active service to new_tarif

        Returns the amount charged (negative means the account was credited).

        Raises:
            TarifNotActiveError: service has no tarif
            TarifGroupMismatchError: tarif belongs to another group
            IncompatibleTarifError: tarif rejected by the current tarif
        """
        if not self.is_active():
            raise TarifNotActiveError(
                f"The service with serviceId = {self.id} does not have a tarif.",
                service_id=self.id,
            )
        self._check_group(new_tarif)
        self.tarif.compare_with_new(new_tarif)

        old_tarif = self.tarif
        change = self.calculate_change(new_tarif, policy, clock)

        self.user.subtract_from_balance(change)
        self.user.update_access_granted(clock.now())

        # re-anchored without the forbidden-day shift applied on start
        self.payday = add_months(
            subtract_months(self.payday, old_tarif.pay_period_months),
            new_tarif.pay_period_months,
        )
        self._assign_tarif(new_tarif)
        return change

    def calculate_change(self, new_tarif: Tarif, policy: ServicePolicy, clock: Clock) -> Decimal:
        old_tarif = self.tarif
        days_per_month = policy.days_per_month

        first_part_in_days = abs((self.payday - clock.today()).days)
        second_part_in_days = (
            new_tarif.pay_period_months - old_tarif.pay_period_months
        ) * days_per_month

        first_part = (
            new_tarif.price_per_day(days_per_month) - old_tarif.price_per_day(days_per_month)
        ) * first_part_in_days
        second_part = new_tarif.price_per_day(days_per_month) * second_part_in_days

        return quantize_money(first_part + second_part)

    # Queries

    def show_available_tarifs(self, tarifs: Iterable[Tarif]) -> List[Tarif]:
        return [
            tarif
            for tarif in tarifs
            if self.tarif.is_compatible_with_new(tarif) and self._group_ids_match(tarif)
        ]

    def info(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "group_id": self.group_id,
            "tarif_info": self.tarif.info(),
            "payday": self.payday.isoformat(),
            "paid_for": self.paid_for,
        }
