"""Point lookups backing the payment endpoints."""
from __future__ import annotations

from typing import Optional, Protocol

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from app.models import Payment, User


class PaymentStore(Protocol):
    """Read-only store consumed by the payment service."""

    def get_user_with_bookings(self, user_id: int) -> Optional[User]: ...

    def get_payment(self, payment_id: int) -> Optional[Payment]: ...


class SqlAlchemyPaymentStore:
    """``PaymentStore`` backed by a request-scoped SQLAlchemy session."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def get_user_with_bookings(self, user_id: int) -> Optional[User]:
        stmt = select(User).options(selectinload(User.bookings)).where(User.id == user_id)
        return self.db.scalars(stmt).first()

    def get_payment(self, payment_id: int) -> Optional[Payment]:
        return self.db.get(Payment, payment_id)
