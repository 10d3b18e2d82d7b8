"""Credit Access Domain Entity

Deferred-payment window: lets a user keep access for a few days while the
balance is negative.
"""

from datetime import datetime, timedelta
from typing import Optional
from sqlmodel import Field, Column
from sqlalchemy import ForeignKey, Integer, DateTime
from src.domain.base import BaseModel


class CreditAccess(BaseModel, table=True):
    """
    Credit Access - Deferred payment window of a user

    Domain Rules:
    - One record per user (user_id is unique)
    - A window runs from taken_at through active_until
    - A new window can only be taken once the previous one has elapsed
    """

    __tablename__ = "credit_accesses"

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(Integer, primary_key=True, autoincrement=True),
        description="Unique credit access identifier (auto-increment)"
    )

    user_id: Optional[int] = Field(
        default=None,
        sa_column=Column(
            Integer,
            ForeignKey("users.id", ondelete="CASCADE"),
            unique=True,
            nullable=False,
        ),
        description="Foreign key to User (unique - one record per user)"
    )

    taken_at: Optional[datetime] = Field(
        default=None,
        sa_column=Column(DateTime, nullable=True),
        description="When the current window was granted"
    )

    active_until: Optional[datetime] = Field(
        default=None,
        sa_column=Column(DateTime, nullable=True),
        description="End of the current window (None = never taken)"
    )

    def is_active(self, now: datetime) -> bool:
        return self.active_until is not None and now <= self.active_until

    def can_take(self, now: datetime) -> bool:
        return not self.is_active(now)

    def days_used(self, now: datetime) -> int:
        """Whole days consumed under the current window"""
        if self.taken_at is None or self.active_until is None:
            return 0
        end = min(now, self.active_until)
        return max(0, (end.date() - self.taken_at.date()).days)

    def grant(self, now: datetime, days: int) -> None:
        self.taken_at = now
        self.active_until = now + timedelta(days=days)
