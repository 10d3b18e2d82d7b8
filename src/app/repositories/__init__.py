from .service_repository import ServiceRepository
from .tarif_repository import TarifRepository
from .user_repository import UserRepository

__all__ = [
    "ServiceRepository",
    "TarifRepository",
    "UserRepository",
]
