from .service_repository import SqlAlchemyServiceRepository
from .tarif_repository import SqlAlchemyTarifRepository
from .user_repository import SqlAlchemyUserRepository

__all__ = [
    "SqlAlchemyServiceRepository",
    "SqlAlchemyTarifRepository",
    "SqlAlchemyUserRepository",
]
