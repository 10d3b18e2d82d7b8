"""Tarif Domain Entity

Pricing plan a service can be subscribed to. A tarif is never modified once
assigned to a service; plan changes swap in another Tarif row.
"""

from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import Integer, Numeric, String
from src.domain.base import BaseModel
from src.domain.exceptions import IncompatibleTarifError

DAYS_PER_MONTH = 30


class TarifType(str, Enum):
    """Tarif types"""
    INTERNET = "internet"
    TV = "tv"
    INACTIVE = "inactive"    # Sentinel for services without a plan


class Tarif(BaseModel, table=True):
    """
    Tarif - Pricing plan

    Domain Rules:
    - price is the total for one pay period (whole currency units)
    - pay period is a whole number of months
    - price_per_day spreads the price over the period (30-day months)
    - base_price_per_day is the undiscounted daily rate used for refunds
    - A plan can only replace another plan of the same type
    - The inactive sentinel is never persisted
    """

    __tablename__ = "tarifs"
    __table_args__ = (
        Index('ix_tarifs_group_id', 'group_id'),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(Integer, primary_key=True, autoincrement=True),
        description="Unique tarif identifier (auto-increment)"
    )

    name: str = Field(
        sa_column=Column(String(100), nullable=False),
        description="Human readable plan name"
    )

    group_id: int = Field(
        description="Group classifier, must match the service group"
    )

    price: int = Field(
        description="Price of one pay period"
    )

    pay_period_months: int = Field(
        description="Pay period length in months"
    )

    base_price_per_day: Decimal = Field(
        sa_column=Column(Numeric(18, 6), nullable=False),
        description="Undiscounted daily rate (precision: 18,6)"
    )

    speed: int = Field(
        default=0,
        description="Bandwidth in Mbit/s"
    )

    type: TarifType = Field(
        default=TarifType.INTERNET,
        description="Tarif type (internet, tv)"
    )

    @classmethod
    def inactive_tarif(cls) -> "Tarif":
        """Sentinel assigned to services without an active plan"""
        return cls(
            id=0,
            name="Inactive",
            group_id=0,
            price=0,
            pay_period_months=0,
            base_price_per_day=Decimal("0"),
            speed=0,
            type=TarifType.INACTIVE,
        )

    def is_inactive(self) -> bool:
        return self.type == TarifType.INACTIVE

    def period_in_days(self, days_per_month: int = DAYS_PER_MONTH) -> int:
        return self.pay_period_months * days_per_month

    def price_per_day(self, days_per_month: int = DAYS_PER_MONTH) -> Decimal:
        days = self.period_in_days(days_per_month)
        if days == 0:
            return Decimal("0")
        return Decimal(self.price) / Decimal(days)

    def is_compatible_with_new(self, candidate: "Tarif") -> bool:
        """
        Check whether candidate may replace this tarif

        Any concrete plan may follow the inactive sentinel. An active plan can
        only be replaced by a different plan of the same type.
        """
        if candidate.is_inactive():
            return False
        if self.is_inactive():
            return True
        return candidate.id != self.id and candidate.type == self.type

    def compare_with_new(self, candidate: "Tarif") -> None:
        """
        Raise IncompatibleTarifError if candidate may not replace this tarif
        """
        if not self.is_compatible_with_new(candidate):
            raise IncompatibleTarifError(
                f"Tarif {candidate.id} ({TarifType(candidate.type).value}) cannot replace "
                f"tarif {self.id} ({TarifType(self.type).value})."
            )

    def info(self) -> Dict[str, Any]:
        return {
            "id": self.id or 0,
            "name": self.name,
            "price": self.price,
            "duration": self.pay_period_months,
            "speed": self.speed,
            "type": TarifType(self.type).value,
        }
