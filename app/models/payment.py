"""Payment model definitions."""
import enum

from sqlalchemy import Boolean, CheckConstraint, Enum as SqlEnum, ForeignKey, JSON, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base


class PaymentOption(str, enum.Enum):
    """When the payment provider captures the funds."""

    ON_BOOKING = "ON_BOOKING"
    HOLD = "HOLD"


class Payment(Base):
    """A monetary transaction made against a single booking.

    ``app_id``, ``external_id`` and ``data`` belong to the payment provider
    integration and are never exposed through the public API.
    """

    __tablename__ = "payments"
    __table_args__ = (
        CheckConstraint("amount >= 0", name="ck_payment_non_negative_amount"),
        CheckConstraint("fee >= 0", name="ck_payment_non_negative_fee"),
    )

    uid: Mapped[str] = mapped_column(String(64), unique=True, nullable=False)
    booking_id: Mapped[int] = mapped_column(ForeignKey("bookings.id"), unique=True, nullable=False)
    amount: Mapped[int] = mapped_column(nullable=False)
    fee: Mapped[int] = mapped_column(nullable=False, default=0)
    currency: Mapped[str] = mapped_column(String(3), nullable=False)
    success: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    refunded: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    payment_option: Mapped[PaymentOption] = mapped_column(
        SqlEnum(PaymentOption), nullable=False, default=PaymentOption.ON_BOOKING
    )
    app_id: Mapped[str | None] = mapped_column(String(64), nullable=True)
    external_id: Mapped[str] = mapped_column(String(128), unique=True, nullable=False)
    data: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)

    booking = relationship("Booking", back_populates="payment")
