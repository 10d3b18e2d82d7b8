"""Data Transfer Objects for Tarif Use Cases

Pydantic models for command inputs and response outputs.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field


class TarifDTO(BaseModel):
    """
    Tarif transfer shape

    Used to transport a plan definition across the API boundary.
    """

    id: int = Field(..., description="Tarif identifier")
    name: str = Field(..., description="Plan name")
    price: int = Field(..., description="Price of one pay period (whole currency units)")
    duration: int = Field(..., description="Pay period in months")
    speed: int = Field(..., description="Bandwidth in Mbit/s")
    type: str = Field(..., description="Tarif type (internet, tv, inactive)")

    class Config:
        json_schema_extra = {
            "example": {
                "id": 3,
                "name": "Home 100",
                "price": 600,
                "duration": 1,
                "speed": 100,
                "type": "internet"
            }
        }


class ServiceInfoDTO(BaseModel):
    """Projection of a service (subscription)"""

    id: int = Field(..., description="Service identifier")
    group_id: int = Field(..., description="Group classifier")
    tarif_info: TarifDTO = Field(..., description="Current tarif (type 'inactive' when dormant)")
    payday: date = Field(..., description="End of the current pay period")
    paid_for: bool = Field(..., description="Whether the current period is paid")

    class Config:
        json_schema_extra = {
            "example": {
                "id": 1,
                "group_id": 1,
                "tarif_info": {
                    "id": 3,
                    "name": "Home 100",
                    "price": 600,
                    "duration": 1,
                    "speed": 100,
                    "type": "internet"
                },
                "payday": "2024-06-10",
                "paid_for": True
            }
        }


class StartTarifCommandDTO(BaseModel):
    """Command DTO for activating a tarif on a dormant service"""

    service_id: int = Field(..., gt=0, description="Service identifier")
    tarif_id: int = Field(..., gt=0, description="Tarif to activate")


class ChangeTarifCommandDTO(BaseModel):
    """Command DTO for switching an active service to another tarif"""

    service_id: int = Field(..., gt=0, description="Service identifier")
    tarif_id: int = Field(..., gt=0, description="Tarif to switch to")


class StopTarifCommandDTO(BaseModel):
    """Command DTO for deactivating the tarif of a service"""

    service_id: int = Field(..., gt=0, description="Service identifier")


class TarifOperationResponseDTO(BaseModel):
    """
    Response DTO for start/stop/change operations

    amount is what the operation did to the balance: the charge for start and
    change, the settlement (refund) for stop.
    """

    service: ServiceInfoDTO
    amount: Decimal = Field(..., description="Charged (start/change) or refunded (stop) amount")
    balance: Decimal = Field(..., description="User balance after the operation")
    access_granted: bool = Field(..., description="User access flag after the operation")

    @classmethod
    def from_service(cls, service, amount: Decimal) -> "TarifOperationResponseDTO":
        return cls(
            service=ServiceInfoDTO(**service.info()),
            amount=amount,
            balance=service.user.balance,
            access_granted=service.user.access_granted,
        )


class AvailableTarifsResponseDTO(BaseModel):
    """Tarifs a service can switch to (or start with)"""

    service_id: int
    tarifs: List[TarifDTO]


class TakeCreditAccessCommandDTO(BaseModel):
    """Command DTO for granting a deferred-payment window"""

    user_id: int = Field(..., gt=0, description="User identifier")


class CreditAccessResponseDTO(BaseModel):
    """Response DTO for a granted deferred-payment window"""

    user_id: int
    taken_at: Optional[datetime] = None
    active_until: Optional[datetime] = None
    balance: Decimal
    access_granted: bool
