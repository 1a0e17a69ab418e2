"""Schemas for payment entities."""
from pydantic import BaseModel, ConfigDict

from app.models.payment import PaymentOption


class PaymentPublic(BaseModel):
    """Externally safe projection of a stored payment."""

    id: int
    amount: int
    success: bool
    refunded: bool
    fee: int
    payment_option: PaymentOption
    currency: str
    booking_id: int

    model_config = ConfigDict(from_attributes=True, extra="ignore")


class PaymentResponse(BaseModel):
    payment: PaymentPublic
