"""Data-access helpers."""
from .payments import PaymentStore, SqlAlchemyPaymentStore

__all__ = ["PaymentStore", "SqlAlchemyPaymentStore"]
