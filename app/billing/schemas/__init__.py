from app.billing.schemas.billing import (  # noqa: F401
    AccessRequest,
    AccessResponse,
    ConfirmRequest,
    ConfirmResponse,
    ErrorResponse,
    PackageResponse,
    TransactionResponse,
)
