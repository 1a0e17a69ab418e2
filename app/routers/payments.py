"""Payment read endpoints."""
from fastapi import APIRouter, Depends, status

from app.dependencies import get_payment_store, valid_query_id
from app.repository.payments import PaymentStore
from app.schemas.payment import PaymentResponse
from app.security import require_user_id
from app.services import payments as payments_service

router = APIRouter(prefix="/v1/payments", tags=["payments"])


@router.get(
    "/{payment_id}",
    response_model=PaymentResponse,
    status_code=status.HTTP_200_OK,
    summary="Get one of your own payments by ID",
    responses={
        400: {"description": "The ID is not a non-negative integer"},
        401: {"description": "Authorization information is missing or invalid"},
        404: {"description": "Payment was not found"},
    },
)
def payment_by_id(
    user_id: int = Depends(require_user_id),
    payment_id: int = Depends(valid_query_id),
    store: PaymentStore = Depends(get_payment_store),
) -> PaymentResponse:
    """Return a payment made against one of the caller's bookings."""

    payment = payments_service.get_payment_for_user(store, payment_id, user_id)
    return PaymentResponse(payment=payment)
