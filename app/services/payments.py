"""Payment lookup services."""
from fastapi import HTTPException, status
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError

from app.core.logging import get_logger
from app.repository.payments import PaymentStore
from app.schemas.payment import PaymentPublic
from app.schemas.query import QueryIdParseInt
from app.utils.errors import error_response

logger = get_logger(__name__)


def _not_found(payment_id: int, cause: str, exc: Exception) -> HTTPException:
    logger.warning(
        "Payment lookup failed",
        extra={"payment_id": payment_id, "cause": cause, "error_type": type(exc).__name__},
    )
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=error_response(
            "PAYMENT_NOT_FOUND",
            f"Payment with id: {payment_id} not found",
            {"cause": cause, "detail": str(exc)},
        ),
    )


def get_payment_for_user(store: PaymentStore, payment_id: int, user_id: int) -> PaymentPublic:
    """Return the public view of ``payment_id`` when one of ``user_id``'s bookings owns it.

    Store failures, missing rows and rows that do not fit ``PaymentPublic`` all
    answer 404; a payment attached to someone else's booking answers 401.
    """

    payment_id = QueryIdParseInt.model_validate({"id": payment_id}).id

    try:
        user = store.get_user_with_bookings(user_id)
        record = store.get_payment(payment_id)
    except (SQLAlchemyError, OverflowError) as exc:
        # sqlite3 raises a bare OverflowError for ids beyond 64 bits
        raise _not_found(payment_id, "store_error", exc) from exc

    try:
        payment = PaymentPublic.model_validate(record)
    except ValidationError as exc:
        cause = "missing" if record is None else "invalid_shape"
        raise _not_found(payment_id, cause, exc) from exc

    booking_ids = {booking.id for booking in user.bookings} if user is not None else set()
    if payment.booking_id not in booking_ids:
        logger.info(
            "Payment access denied",
            extra={"payment_id": payment_id, "user_id": user_id},
        )
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=error_response("UNAUTHORIZED", "Unauthorized"),
        )

    return payment
