"""User Domain Entity

Billing account owning the balance and the deferred-payment window.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from sqlmodel import Field, Column, Relationship
from sqlalchemy import Integer, Numeric, String
from src.domain.base import BaseModel
from src.domain.balance import Balance
from src.domain.credit_access import CreditAccess
from src.domain.exceptions import CreditAccessUnavailableError


class User(BaseModel, table=True):
    """
    User - Billing account

    Domain Rules:
    - Balance may go negative (debt)
    - Balance changes only through add_to_balance/subtract_from_balance
    - access_granted is derived; recompute it with update_access_granted()
    """

    __tablename__ = "users"

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(Integer, primary_key=True, autoincrement=True),
        description="Unique user identifier (auto-increment)"
    )

    name: str = Field(
        default="",
        sa_column=Column(String(255), nullable=False, default=""),
        description="Account holder name"
    )

    balance: Decimal = Field(
        default=Decimal("0"),
        sa_column=Column(Numeric(18, 6), nullable=False, default=0),
        description="Current balance, negative when in debt (precision: 18,6)"
    )

    access_granted: bool = Field(
        default=False,
        description="Whether the account currently has network access"
    )

    credit_access: Optional[CreditAccess] = Relationship(
        sa_relationship_kwargs={"uselist": False, "lazy": "selectin"}
    )

    def current_balance(self) -> Balance:
        return Balance(amount=self.balance)

    def add_to_balance(self, amount: Decimal) -> Balance:
        new_balance = self.current_balance().add(amount)
        self.balance = new_balance.amount
        return new_balance

    def subtract_from_balance(self, amount: Decimal) -> Balance:
        new_balance = self.current_balance().subtract(amount)
        self.balance = new_balance.amount
        return new_balance

    def credit_access_active(self, now: datetime) -> bool:
        return self.credit_access is not None and self.credit_access.is_active(now)

    def update_access_granted(self, now: datetime) -> bool:
        self.access_granted = (
            self.current_balance().is_positive() or self.credit_access_active(now)
        )
        return self.access_granted

    def take_credit_access(self, now: datetime, days: int) -> CreditAccess:
        """
        Grant a deferred-payment window of the given length

        Raises:
            CreditAccessUnavailableError: balance is not negative, or a window
                is still running
        """
        if self.current_balance().is_positive():
            raise CreditAccessUnavailableError(
                f"User {self.id} has a non-negative balance and needs no credit access."
            )
        if self.credit_access is not None and not self.credit_access.can_take(now):
            raise CreditAccessUnavailableError(
                f"User {self.id} already has credit access until "
                f"{self.credit_access.active_until.isoformat()}."
            )

        if self.credit_access is None:
            self.credit_access = CreditAccess(user_id=self.id)
        self.credit_access.grant(now, days)
        self.update_access_granted(now)
        return self.credit_access
