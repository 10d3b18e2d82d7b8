"""Balance value object"""

from decimal import Decimal, ROUND_HALF_UP
from pydantic import BaseModel, ConfigDict

MONEY_QUANTUM = Decimal("0.000001")


def quantize_money(value) -> Decimal:
    """Round an amount to the precision of Numeric(18, 6) columns"""
    return Decimal(value).quantize(MONEY_QUANTUM, rounding=ROUND_HALF_UP)


class Balance(BaseModel):
    """
    Signed account balance

    Immutable: add/subtract return a new Balance. A negative amount is a debt.
    """

    model_config = ConfigDict(frozen=True)

    amount: Decimal = Decimal("0")

    def add(self, amount) -> "Balance":
        return Balance(amount=quantize_money(self.amount + Decimal(amount)))

    def subtract(self, amount) -> "Balance":
        return Balance(amount=quantize_money(self.amount - Decimal(amount)))

    def is_positive(self) -> bool:
        # zero counts as paid
        return self.amount >= 0
