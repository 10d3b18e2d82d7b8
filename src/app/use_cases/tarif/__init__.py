"""Tarif lifecycle use cases"""
from .start_tarif import StartTarif
from .stop_tarif import StopTarif
from .change_tarif import ChangeTarif
from .get_service_info import GetServiceInfo
from .list_available_tarifs import ListAvailableTarifs
from .take_credit_access import TakeCreditAccess
from .dtos import (
    TarifDTO,
    ServiceInfoDTO,
    StartTarifCommandDTO,
    StopTarifCommandDTO,
    ChangeTarifCommandDTO,
    TarifOperationResponseDTO,
    AvailableTarifsResponseDTO,
    TakeCreditAccessCommandDTO,
    CreditAccessResponseDTO,
)

__all__ = [
    "StartTarif",
    "StopTarif",
    "ChangeTarif",
    "GetServiceInfo",
    "ListAvailableTarifs",
    "TakeCreditAccess",
    "TarifDTO",
    "ServiceInfoDTO",
    "StartTarifCommandDTO",
    "StopTarifCommandDTO",
    "ChangeTarifCommandDTO",
    "TarifOperationResponseDTO",
    "AvailableTarifsResponseDTO",
    "TakeCreditAccessCommandDTO",
    "CreditAccessResponseDTO",
]
