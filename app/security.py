# app/security.py
"""Security dependencies resolving the calling user from an API key."""
from __future__ import annotations

from fastapi import Depends, Header, HTTPException, Query, status
from sqlalchemy.orm import Session

from app.core.logging import get_logger
from app.db import get_db
from app.models.api_key import ApiKey
from app.utils.apikey import find_valid_key
from app.utils.errors import error_response
from app.utils.time import utcnow

logger = get_logger(__name__)


def _extract_key(
    authorization: str | None = Header(default=None),
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
    api_key: str | None = Query(default=None, alias="apiKey"),
) -> str | None:
    """Read the key from X-API-Key, Authorization: Bearer ... or ?apiKey=."""
    if x_api_key:
        return x_api_key.strip()
    if authorization and authorization.startswith("Bearer "):
        return authorization.split(" ", 1)[1].strip()
    if api_key:
        return api_key.strip()
    return None


def require_api_key(
    db: Session = Depends(get_db),
    token: str | None = Depends(_extract_key),
) -> ApiKey:
    """Validate API key tokens and return the corresponding row."""
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=error_response("NO_API_KEY", "API key required."),
        )

    key = find_valid_key(db, token)
    if key is None:
        logger.info("Rejected API key", extra={"key_prefix": token.split(".", 1)[0][:12]})
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=error_response("INVALID_API_KEY", "Invalid or expired API key."),
        )

    key.last_used_at = utcnow()
    db.commit()
    return key


def require_user_id(api_key: ApiKey = Depends(require_api_key)) -> int:
    """Return the identifier of the user owning the API key."""

    return api_key.user_id


__all__ = ["require_api_key", "require_user_id"]
