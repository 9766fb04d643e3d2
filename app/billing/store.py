"""
Transaction store: persistence of access requests over an injected session.
"""
from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.billing.errors import ConflictError, StorageError
from app.billing.models import STATUS_PAID, STATUS_PENDING, TransactionModel

logger = logging.getLogger(__name__)


class TransactionStore:
    """Single-statement operations on the ``transactions`` table.

    Each write commits on its own; nothing spans more than one statement.
    """

    def __init__(self, db: Session):
        self.db = db

    def create(
        self,
        phone: str,
        package: str,
        amount: int,
        code: str,
        username: str,
        password: str,
        expires_at: datetime,
    ) -> TransactionModel:
        row = TransactionModel(
            phone=phone,
            package=package,
            amount=amount,
            code=code,
            username=username,
            password=password,
            status=STATUS_PENDING,
            expires_at=expires_at,
        )
        try:
            self.db.add(row)
            self.db.commit()
            self.db.refresh(row)
        except IntegrityError as e:
            self.db.rollback()
            logger.warning("Code collision on insert: %s", code)
            raise ConflictError() from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("Insert failed for code %s", code, exc_info=True)
            raise StorageError() from e

        logger.info("Stored transaction %s (package=%s, code=%s)", row.id, package, code)
        return row

    def find_pending_by_code(self, code: Optional[str]) -> Optional[TransactionModel]:
        if not code:
            return None
        try:
            return (
                self.db.query(TransactionModel)
                .filter(
                    TransactionModel.code == code,
                    TransactionModel.status == STATUS_PENDING,
                )
                .first()
            )
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("Lookup failed for code %s", code, exc_info=True)
            raise StorageError() from e

    def mark_paid(self, code: str) -> bool:
        """Flip a pending row to paid. Returns False if no pending row matched."""
        try:
            updated = (
                self.db.query(TransactionModel)
                .filter(
                    TransactionModel.code == code,
                    TransactionModel.status == STATUS_PENDING,
                )
                .update({TransactionModel.status: STATUS_PAID}, synchronize_session=False)
            )
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("Status update failed for code %s", code, exc_info=True)
            raise StorageError("Update failed") from e
        return updated == 1

    def list_recent(self, limit: int) -> List[TransactionModel]:
        try:
            return (
                self.db.query(TransactionModel)
                .order_by(TransactionModel.created_at.desc(), TransactionModel.id.desc())
                .limit(limit)
                .all()
            )
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("Listing transactions failed", exc_info=True)
            raise StorageError() from e
