"""Schema package exports."""
from .payment import PaymentPublic, PaymentResponse
from .query import QueryIdParseInt

__all__ = [
    "PaymentPublic",
    "PaymentResponse",
    "QueryIdParseInt",
]
