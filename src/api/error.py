"""API error handling

Use case errors reach the client as {"error": {"code": ..., "message": ...}}.
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from libs.result import Error

# Domain rule violations surfaced as 409 Conflict
DOMAIN_CONFLICT_CODES = {
    "TARIF_ALREADY_ACTIVE",
    "TARIF_NOT_ACTIVE",
    "TARIF_GROUP_MISMATCH",
    "TARIF_INCOMPATIBLE",
    "CREDIT_ACCESS_UNAVAILABLE",
}


class ClientError(Exception):
    def __init__(self, error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        super().__init__(error.message)
        self.error = error
        self.status_code = status_code


def status_for(error: Error) -> int:
    if error.code.endswith("_NOT_FOUND"):
        return status.HTTP_404_NOT_FOUND
    if error.code in DOMAIN_CONFLICT_CODES:
        return status.HTTP_409_CONFLICT
    return status.HTTP_400_BAD_REQUEST


async def client_error_handler(request: Request, exc: ClientError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": {
                "code": exc.error.code,
                "message": exc.error.message,
            }
        },
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ClientError, client_error_handler)
