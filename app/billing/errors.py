"""
Billing error taxonomy and its mapping onto HTTP responses.

Every error carries the status code and the short public message the API
returns as ``{"error": message}``.
"""
from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class BillingError(Exception):
    status_code = 500
    message = "Internal error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)
        self.message = message or self.message


class InvalidRequest(BillingError):
    """Missing input or unknown package."""
    status_code = 400
    message = "Invalid request"


class InvalidOrUsedCode(BillingError):
    """No pending transaction for the code: wrong, already paid or never issued."""
    status_code = 400
    message = "Invalid code or already used"


class StorageError(BillingError):
    status_code = 500
    message = "Database error"


class ConflictError(StorageError):
    """Unique constraint violation (duplicate code)."""


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(BillingError)
    async def billing_error_handler(request: Request, exc: BillingError):
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        else:
            logger.info("%s %s rejected: %s", request.method, request.url.path, exc.message)
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.info("Malformed body on %s: %s", request.url.path, exc.errors())
        return JSONResponse(
            status_code=InvalidRequest.status_code,
            content={"error": InvalidRequest.message},
        )
