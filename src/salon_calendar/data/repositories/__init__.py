"""Event stores: the remote API and the local JSON file."""

from __future__ import annotations

from .events import EventRepository, HttpEventRepository
from .local import JsonEventRepository

__all__ = ["EventRepository", "HttpEventRepository", "JsonEventRepository"]
