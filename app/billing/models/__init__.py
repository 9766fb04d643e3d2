from app.billing.models.transaction import (  # noqa: F401
    STATUS_PAID,
    STATUS_PENDING,
    TransactionModel,
)
