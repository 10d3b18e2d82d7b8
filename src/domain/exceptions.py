"""Domain rule violations

Every violation of a tarif lifecycle rule raises a subclass of
DomainLogicException. Each subclass carries a stable ``code`` so that use
cases and the API can branch on the kind of violation without parsing
messages.
"""

from typing import Optional


class DomainLogicException(Exception):
    """Base class for business rule violations"""

    code = "DOMAIN_LOGIC_ERROR"

    def __init__(self, message: str, service_id: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.service_id = service_id


class TarifAlreadyActiveError(DomainLogicException):
    """Raised when starting a tarif on a service that already has one"""

    code = "TARIF_ALREADY_ACTIVE"


class TarifNotActiveError(DomainLogicException):
    """Raised when stopping or changing a tarif on a dormant service"""

    code = "TARIF_NOT_ACTIVE"


class TarifGroupMismatchError(DomainLogicException):
    """Raised when the tarif group differs from the service group"""

    code = "TARIF_GROUP_MISMATCH"


class IncompatibleTarifError(DomainLogicException):
    """Raised by Tarif.compare_with_new when the candidate is not eligible"""

    code = "TARIF_INCOMPATIBLE"


class CreditAccessUnavailableError(DomainLogicException):
    """Raised when deferred access cannot be granted right now"""

    code = "CREDIT_ACCESS_UNAVAILABLE"
