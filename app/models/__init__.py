"""ORM models package."""
from .api_key import ApiKey
from .base import Base
from .booking import Booking, BookingStatus
from .payment import Payment, PaymentOption
from .user import User

__all__ = [
    "ApiKey",
    "Base",
    "Booking",
    "BookingStatus",
    "Payment",
    "PaymentOption",
    "User",
]
