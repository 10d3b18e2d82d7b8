"""Tarif lifecycle policy

Deployment-specific constants consumed by the Service state machine.
Built from ApplicationConfig in src.depends.
"""

from typing import FrozenSet, Tuple
from pydantic import BaseModel, ConfigDict, Field


class ServicePolicy(BaseModel):
    """
    Service Policy - knobs of the tarif lifecycle

    - latency_period_days: a dormant service whose payday is further in the
      past than this starts its next period from today
    - forbidden_days: days of month never used as a period anchor
    - tarif_group_ids: groups offered in the tarif catalog
    - days_per_month: month length used for proration
    - credit_access_days: length of a deferred-payment window
    """

    model_config = ConfigDict(frozen=True)

    latency_period_days: int = Field(default=10, ge=0)
    forbidden_days: FrozenSet[int] = Field(default=frozenset({29, 30, 31}))
    tarif_group_ids: Tuple[int, ...] = Field(default=(1,))
    days_per_month: int = Field(default=30, gt=0)
    credit_access_days: int = Field(default=3, gt=0)
