"""Application services orchestrating the event store and the edit session."""

from __future__ import annotations

from .auth import AuthService
from .context import ServiceContext
from .forms import EventForm, merge_field_errors
from .notifications import Notification, NotificationLevel, Notifier
from .reconciliation import InvalidTransitionError, ReconciliationController, SessionState

__all__ = [
    "AuthService",
    "EventForm",
    "InvalidTransitionError",
    "Notification",
    "NotificationLevel",
    "Notifier",
    "ReconciliationController",
    "ServiceContext",
    "SessionState",
    "merge_field_errors",
]
