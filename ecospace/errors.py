"""Error taxonomy shared by the engine, the repository and the HTTP edge.

Invariants:
    - ValidationError always carries the full list of field violations
    - NotFoundError / ConflictError / InternalError carry only a message
    - InternalError messages are generic; details go to the log, not the client
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class FieldError:
    field: str
    message: str

    def as_dict(self) -> dict[str, str]:
        return {"field": self.field, "message": self.message}


class CatalogError(Exception):
    """Base class for every error the catalog surfaces to callers."""

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_response(self) -> dict[str, Any]:
        return {"message": self.message}


class ValidationError(CatalogError, ValueError):
    """Client-correctable input: bad filter value, closed-set violation, inconsistent ranges."""

    status_code = 400

    def __init__(self, errors: list[FieldError], message: str = "Validation error"):
        super().__init__(message)
        self.errors = list(errors)

    def to_response(self) -> dict[str, Any]:
        return {
            "message": self.message,
            "errors": [error.as_dict() for error in self.errors],
        }


class NotFoundError(CatalogError, LookupError):
    """Target record does not exist or is no longer visible."""

    status_code = 404


class ConflictError(CatalogError):
    """Uniqueness or referential violation reported by the persistence layer."""

    status_code = 409


class InternalError(CatalogError):
    """Unexpected persistence failure."""

    status_code = 500
