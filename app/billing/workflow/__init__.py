"""
Request/confirm workflow.

request_access:  validate → generate code + credentials → store pending → notify
confirm_payment: find pending → mark paid → notify credentials

Notification is best-effort: a failed send is logged and never undoes the
state change that preceded it.
"""
from __future__ import annotations

import logging
from typing import Optional

from app.billing.database import utcnow
from app.billing.errors import InvalidOrUsedCode, InvalidRequest
from app.billing.models import TransactionModel
from app.billing.store import TransactionStore
from app.billing.workflow import catalog, messages
from app.billing.workflow.credentials import generate_code, generate_credentials
from app.billing.workflow.notifier import Notifier
from app.config import Settings

logger = logging.getLogger(__name__)


def _notify(notifier: Notifier, destination: str, message: str) -> bool:
    try:
        delivered = notifier.send(destination, message)
    except Exception:
        logger.warning("Notification to %s raised", destination, exc_info=True)
        return False
    if not delivered:
        logger.warning("Notification to %s not delivered", destination)
    return bool(delivered)


def request_access(
    store: TransactionStore,
    notifier: Notifier,
    settings: Settings,
    phone: Optional[str],
    package_id: Optional[str],
) -> TransactionModel:
    """Create a pending transaction and send payment instructions.

    Raises ``InvalidRequest`` before touching the store when the phone is
    missing or the package is unknown. Store failures propagate as
    ``StorageError`` and no message is sent.
    """
    package = catalog.lookup(package_id)
    if not phone or not phone.strip() or package is None:
        raise InvalidRequest()

    code = generate_code()
    username, password = generate_credentials(settings.USERNAME_PREFIX)
    expires = catalog.expires_at(package, utcnow())

    row = store.create(
        phone=phone,
        package=package.id,
        amount=package.price,
        code=code,
        username=username,
        password=password,
        expires_at=expires,
    )
    logger.info("Access requested: phone=%s package=%s code=%s", phone, package.id, code)

    _notify(
        notifier,
        phone,
        messages.payment_instructions(package, code, settings.PAYMENT_NUMBER, settings.CURRENCY),
    )
    return row


def confirm_payment(
    store: TransactionStore,
    notifier: Notifier,
    settings: Settings,
    code: Optional[str],
    payment_ref: Optional[str] = None,
) -> TransactionModel:
    """Mark the pending transaction for ``code`` as paid and send its login.

    Wrong, already-used and never-issued codes all raise ``InvalidOrUsedCode``.
    ``payment_ref`` is recorded in the log only; it is not checked against
    any payment provider.
    """
    row = store.find_pending_by_code(code)
    if row is None:
        raise InvalidOrUsedCode()

    # guards against a concurrent confirmation that won the race
    if not store.mark_paid(code):
        raise InvalidOrUsedCode()
    logger.info("Payment confirmed: code=%s ref=%s", code, payment_ref)

    _notify(
        notifier,
        row.phone,
        messages.login_details(row.username, row.password, row.expires_at, settings.WIFI_SSID),
    )
    return row
