"""Pydantic schemas for request parsing and view data."""

from person_registry.schemas.errors import ErrorDetail, ErrorResponse
from person_registry.schemas.person import PersonIn, PersonOut

__all__ = [
    "ErrorDetail",
    "ErrorResponse",
    "PersonIn",
    "PersonOut",
]
