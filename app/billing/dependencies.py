"""
Dependency wiring: everything a route needs comes from ``app.state``.
"""
from __future__ import annotations

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from app.billing.database import get_db
from app.billing.store import TransactionStore
from app.billing.workflow.notifier import Notifier
from app.config import Settings


def get_store(db: Session = Depends(get_db)) -> TransactionStore:
    return TransactionStore(db)


def get_notifier(request: Request) -> Notifier:
    return request.app.state.notifier


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
