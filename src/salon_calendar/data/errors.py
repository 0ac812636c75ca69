from __future__ import annotations

from typing import Iterable, List, Optional

from ..domain import FieldError


class StoreError(RuntimeError):
    """Opaque store failure; carries only a human-readable message."""

    def __init__(self, message: str, *, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class FieldValidationFailure(StoreError):
    """The store rejected a payload with field-scoped messages."""

    def __init__(self, errors: Iterable[FieldError], *, status_code: Optional[int] = None) -> None:
        self.errors: List[FieldError] = list(errors)
        summary = "; ".join(f"{error.field}: {error.message}" for error in self.errors)
        super().__init__(summary or "Validation failed", status_code=status_code)

    def fields(self) -> List[str]:
        return [error.field for error in self.errors]


class AuthenticationRequiredError(StoreError):
    """Raised on 401 after the local session token has been discarded."""


class EventNotFoundError(StoreError):
    """Raised by stores that can tell an unknown id from other failures."""
