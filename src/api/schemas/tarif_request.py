"""Request schemas for Tarif API

Pydantic models for validating incoming HTTP requests.
"""

from pydantic import BaseModel, Field


class StartTarifRequestSchema(BaseModel):
    """
    Request schema for starting a tarif

    Used for POST /services/{service_id}/tarif/start endpoint.
    """

    tarif_id: int = Field(
        ...,
        gt=0,
        description="Tarif to activate"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "tarif_id": 3
            }
        }


class ChangeTarifRequestSchema(BaseModel):
    """
    Request schema for changing a tarif

    Used for POST /services/{service_id}/tarif/change endpoint.
    """

    tarif_id: int = Field(
        ...,
        gt=0,
        description="Tarif to switch to"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "tarif_id": 4
            }
        }
