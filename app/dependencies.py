"""Shared FastAPI dependencies."""
from fastapi import Depends, HTTPException, Path, status
from pydantic import ValidationError
from sqlalchemy.orm import Session

from app.db import get_db
from app.repository.payments import PaymentStore, SqlAlchemyPaymentStore
from app.schemas.query import QueryIdParseInt
from app.utils.errors import error_response


def valid_query_id(payment_id: str = Path(..., description="Numeric ID of the resource")) -> int:
    """Parse the path identifier, answering 400 when it is not a non-negative integer."""

    try:
        return QueryIdParseInt.model_validate({"id": payment_id}).id
    except ValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=error_response(
                "INVALID_QUERY_ID",
                "Query id must be a non-negative integer.",
                {"id": payment_id},
            ),
        ) from exc


def get_payment_store(db: Session = Depends(get_db)) -> PaymentStore:
    return SqlAlchemyPaymentStore(db)
