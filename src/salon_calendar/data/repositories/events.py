from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Protocol

from ...domain import Event
from ..errors import StoreError
from ..http import ApiGateway

logger = logging.getLogger(__name__)


class EventRepository(Protocol):
    """Four-operation store used by the calendar; one round trip per call, no retries."""

    def list(self) -> List[Event]: ...

    def get(self, event_id: str) -> Event: ...

    def create(self, event: Event) -> Event: ...

    def update(self, event_id: str, event: Event) -> Event: ...

    def delete(self, event_id: str) -> None: ...


def _event_from_body(body: object) -> Event:
    if not isinstance(body, dict):
        raise StoreError("Sunucu beklenmeyen bir yanıt döndürdü.")
    try:
        return Event.from_record(body)
    except (KeyError, TypeError, ValueError) as exc:
        raise StoreError(f"Sunucu yanıtı çözümlenemedi: {exc}") from exc


@dataclass(slots=True)
class HttpEventRepository:
    gateway: ApiGateway
    resource: str = "/events"

    def list(self) -> List[Event]:
        body = self.gateway.request("GET", self.resource)
        if not isinstance(body, list):
            raise StoreError("Sunucu beklenmeyen bir yanıt döndürdü.")
        return [_event_from_body(record) for record in body]

    def get(self, event_id: str) -> Event:
        return _event_from_body(self.gateway.request("GET", f"{self.resource}/{event_id}"))

    def create(self, event: Event) -> Event:
        payload = event.to_record(include_id=False)
        return _event_from_body(self.gateway.request("POST", self.resource, json=payload))

    def update(self, event_id: str, event: Event) -> Event:
        payload = {**event.to_record(include_id=False), "id": event_id}
        return _event_from_body(self.gateway.request("PUT", self.resource, json=payload))

    def delete(self, event_id: str) -> None:
        self.gateway.request("DELETE", f"{self.resource}/{event_id}")
        logger.info("Deleted event %s", event_id)
