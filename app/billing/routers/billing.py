"""
Billing API endpoints.

POST /api/request-access   — create a pending transaction, SMS payment code
POST /api/confirm-payment  — mark a code paid, SMS + return credentials
GET  /api/transactions     — most recent transactions, newest first
GET  /api/packages         — the package catalog
"""
from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends

from app.billing import workflow
from app.billing.dependencies import get_notifier, get_settings, get_store
from app.billing.schemas import (
    AccessRequest,
    AccessResponse,
    ConfirmRequest,
    ConfirmResponse,
    ErrorResponse,
    PackageResponse,
    TransactionResponse,
)
from app.billing.store import TransactionStore
from app.billing.workflow import catalog
from app.billing.workflow.notifier import Notifier
from app.config import Settings

logger = logging.getLogger(__name__)
router = APIRouter()

_ERRORS = {400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}


# ── POST /api/request-access ─────────────────────────────────────────────
@router.post("/request-access", response_model=AccessResponse, responses=_ERRORS)
def request_access(
    req: AccessRequest,
    store: TransactionStore = Depends(get_store),
    notifier: Notifier = Depends(get_notifier),
    settings: Settings = Depends(get_settings),
):
    row = workflow.request_access(store, notifier, settings, req.phone, req.package)
    return AccessResponse(
        code=row.code,
        message="Payment instructions sent! Check console for SMS.",
    )


# ── POST /api/confirm-payment ────────────────────────────────────────────
@router.post("/confirm-payment", response_model=ConfirmResponse, responses=_ERRORS)
def confirm_payment(
    req: ConfirmRequest,
    store: TransactionStore = Depends(get_store),
    notifier: Notifier = Depends(get_notifier),
    settings: Settings = Depends(get_settings),
):
    row = workflow.confirm_payment(store, notifier, settings, req.code, req.mpesa_ref)
    return ConfirmResponse(
        username=row.username,
        password=row.password,
        message="Check console for login details!",
    )


# ── GET /api/transactions ────────────────────────────────────────────────
@router.get("/transactions", response_model=List[TransactionResponse], responses=_ERRORS)
def list_transactions(
    store: TransactionStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
):
    rows = store.list_recent(settings.RECENT_LIMIT)
    logger.info("Found %d transactions in database", len(rows))
    return [TransactionResponse.model_validate(r) for r in rows]


# ── GET /api/packages ────────────────────────────────────────────────────
@router.get("/packages", response_model=List[PackageResponse])
def list_packages():
    return [
        PackageResponse(
            id=p.id,
            name=p.name,
            price=p.price,
            duration_seconds=int(p.duration.total_seconds()),
        )
        for p in catalog.list_packages()
    ]
