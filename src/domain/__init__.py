from .base import BaseModel
from .balance import Balance
from .clock import Clock, SystemClock, FixedClock
from .policy import ServicePolicy
from .tarif import Tarif, TarifType
from .credit_access import CreditAccess
from .user import User
from .service import Service
from .exceptions import (
    DomainLogicException,
    TarifAlreadyActiveError,
    TarifNotActiveError,
    TarifGroupMismatchError,
    IncompatibleTarifError,
    CreditAccessUnavailableError,
)

__all__ = [
    "BaseModel",
    "Balance",
    "Clock",
    "SystemClock",
    "FixedClock",
    "ServicePolicy",
    "Tarif",
    "TarifType",
    "CreditAccess",
    "User",
    "Service",
    "DomainLogicException",
    "TarifAlreadyActiveError",
    "TarifNotActiveError",
    "TarifGroupMismatchError",
    "IncompatibleTarifError",
    "CreditAccessUnavailableError",
]
