"""
SQLAlchemy model for access-package transactions.
"""
from sqlalchemy import Column, DateTime, Integer, String

from app.billing.database import Base, utcnow

STATUS_PENDING = "pending"
STATUS_PAID = "paid"


class TransactionModel(Base):
    """One access request and the credentials issued for it."""
    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    phone = Column(String, nullable=False)
    package = Column(String, nullable=False)
    amount = Column(Integer, nullable=False)  # copied from the catalog at creation
    code = Column(String, unique=True, index=True)
    username = Column(String)
    password = Column(String)
    status = Column(String, nullable=False, default=STATUS_PENDING)  # pending, paid
    created_at = Column(DateTime, default=utcnow, nullable=False)
    expires_at = Column(DateTime)  # stored for the user message, never enforced

    def __repr__(self) -> str:
        return f"<TransactionModel id={self.id} code={self.code} status={self.status}>"
