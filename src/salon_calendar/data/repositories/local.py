from __future__ import annotations

import logging
import threading
from dataclasses import replace
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional
from uuid import uuid4

import orjson

from ...domain import Event
from ..errors import EventNotFoundError, StoreError

logger = logging.getLogger(__name__)

DEFAULT_STORE_CONTENT: Dict[str, Any] = {"events": [], "metadata": {"schema_version": 1}}


class JsonEventRepository:
    """Local-only event store backed by a JSON file."""

    def __init__(self, path: Path) -> None:
        self._path = path
        self._lock = threading.Lock()
        self._cache: Optional[Dict[str, Any]] = None

    def _load_raw(self) -> Dict[str, Any]:
        if self._cache is None:
            if not self._path.exists():
                self._path.parent.mkdir(parents=True, exist_ok=True)
                self._path.write_bytes(orjson.dumps(DEFAULT_STORE_CONTENT) + b"\n")
            try:
                data = orjson.loads(self._path.read_bytes() or b"{}")
            except orjson.JSONDecodeError as exc:
                raise StoreError(f"Yerel kayıt dosyası okunamadı: {self._path}") from exc
            events = data.get("events", []) if isinstance(data, dict) else None
            if not isinstance(events, list):
                raise StoreError(f"Yerel kayıt dosyası beklenen biçimde değil: {self._path}")
            metadata = data.get("metadata")
            self._cache = {
                "events": list(events),
                "metadata": dict(metadata) if isinstance(metadata, dict) else {},
            }
        return self._cache

    def _persist(self) -> None:
        if self._cache is None:
            return
        payload = orjson.dumps(self._cache, option=orjson.OPT_INDENT_2)
        self._path.write_bytes(payload + b"\n")

    def _index_of(self, event_id: str) -> int:
        for index, record in enumerate(self._load_raw()["events"]):
            if isinstance(record, dict) and record.get("id") == event_id:
                return index
        raise EventNotFoundError(f"Event bulunamadı: {event_id}", status_code=404)

    def list(self) -> List[Event]:
        with self._lock:
            return [_event_from_record(record) for record in self._load_raw()["events"]]

    def get(self, event_id: str) -> Event:
        with self._lock:
            records = self._load_raw()["events"]
            return _event_from_record(records[self._index_of(event_id)])

    def create(self, event: Event) -> Event:
        now = datetime.now()
        saved = replace(event, id=str(uuid4()), created_date=now, updated_date=now)
        with self._lock:
            self._load_raw()["events"].append(_stamped_record(saved))
            self._persist()
        logger.info("Stored event %s locally", saved.id)
        return saved

    def update(self, event_id: str, event: Event) -> Event:
        with self._lock:
            records = self._load_raw()["events"]
            index = self._index_of(event_id)
            existing = _event_from_record(records[index])
            saved = replace(
                event,
                id=event_id,
                created_date=existing.created_date,
                updated_date=datetime.now(),
            )
            records[index] = _stamped_record(saved)
            self._persist()
        return saved

    def delete(self, event_id: str) -> None:
        with self._lock:
            records = self._load_raw()["events"]
            records.pop(self._index_of(event_id))
            self._persist()
        logger.info("Removed local event %s", event_id)


def _stamped_record(event: Event) -> Dict[str, Any]:
    record = event.to_record()
    record["createdDate"] = event.created_date.isoformat() if event.created_date else None
    record["updatedDate"] = event.updated_date.isoformat() if event.updated_date else None
    return record


def _event_from_record(record: Any) -> Event:
    if not isinstance(record, dict):
        raise StoreError("Yerel kayıt dosyasında geçersiz bir etkinlik var.")
    try:
        return Event.from_record(record)
    except (KeyError, TypeError, ValueError) as exc:
        raise StoreError(f"Yerel etkinlik kaydı çözümlenemedi: {exc}") from exc
