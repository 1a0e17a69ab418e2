"""Schemas for identifiers taken from the request path."""
import re
from typing import Any

from pydantic import BaseModel, field_validator

_DIGITS = re.compile(r"[0-9]+")


class QueryIdParseInt(BaseModel):
    """A resource identifier given as decimal digits, exposed as ``int``."""

    id: int

    @field_validator("id", mode="before")
    @classmethod
    def _parse_digits(cls, value: Any) -> int:
        if isinstance(value, bool):
            raise ValueError("id must be a non-negative integer")
        if isinstance(value, int):
            if value < 0:
                raise ValueError("id must be a non-negative integer")
            return value
        text = str(value)
        if not _DIGITS.fullmatch(text):
            raise ValueError("id must be a non-negative integer")
        return int(text)
