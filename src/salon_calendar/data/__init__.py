"""Data access layer."""

from __future__ import annotations

from .errors import AuthenticationRequiredError, EventNotFoundError, FieldValidationFailure, StoreError
from .http import ApiGateway, parse_field_errors
from .repositories import EventRepository, HttpEventRepository, JsonEventRepository
from .tokens import TokenStore

__all__ = [
    "ApiGateway",
    "AuthenticationRequiredError",
    "EventNotFoundError",
    "EventRepository",
    "FieldValidationFailure",
    "HttpEventRepository",
    "JsonEventRepository",
    "StoreError",
    "TokenStore",
    "parse_field_errors",
]
