"""API error handling

ClientError carries a use case Error to the HTTP layer; the registered
handler renders it as {"error": {"code", "message"}}.
"""

import logging
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from libs.result import Error

logger = logging.getLogger(__name__)

STATUS_BY_CODE = {
    "AUTHENTICATION_REQUIRED": status.HTTP_401_UNAUTHORIZED,
    "INVALID_CREDENTIALS": status.HTTP_401_UNAUTHORIZED,
    "SIGN_UP_REJECTED": status.HTTP_400_BAD_REQUEST,
    "INVALID_LINE_ITEM": status.HTTP_400_BAD_REQUEST,
    "IDENTIFIER_GENERATION_EXHAUSTED": status.HTTP_409_CONFLICT,
    "INVOICE_NUMBER_TAKEN": status.HTTP_409_CONFLICT,
    "SKU_TAKEN": status.HTTP_409_CONFLICT,
    "IDENTITY_PROVIDER_UNAVAILABLE": status.HTTP_503_SERVICE_UNAVAILABLE,
}


def status_for(error: Error) -> int:
    """HTTP status of a use case error code"""
    if error.code in STATUS_BY_CODE:
        return STATUS_BY_CODE[error.code]
    if error.code.endswith("_NOT_FOUND"):
        return status.HTTP_404_NOT_FOUND
    if error.code.endswith("_FAILED"):
        return status.HTTP_500_INTERNAL_SERVER_ERROR
    return status.HTTP_400_BAD_REQUEST


class ClientError(Exception):
    def __init__(self, error: Error, status_code: int = None):
        super().__init__(error.message)
        self.error = error
        self.status_code = status_code or status_for(error)


async def client_error_handler(request: Request, exc: ClientError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed with {exc.error.code}: {exc.error.reason}")
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == status.HTTP_401_UNAUTHORIZED else None
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": {"code": exc.error.code, "message": exc.error.message}},
        headers=headers,
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ClientError, client_error_handler)
