from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .paths import DATA_DIR

load_dotenv()


@dataclass(frozen=True)
class ApiSettings:
    base_url: str
    token: Optional[str]
    timeout_seconds: float

    @property
    def is_configured(self) -> bool:
        return bool(self.base_url)


@dataclass(frozen=True)
class StorageSettings:
    backend: str
    local_path: Path

    @property
    def is_local(self) -> bool:
        return self.backend == "local"


@dataclass(frozen=True)
class UiSettings:
    app_name: str
    organization: str
    narrow_viewport_px: int


@dataclass(frozen=True)
class ServerSettings:
    host: str
    port: int
    token: Optional[str]


@dataclass(frozen=True)
class AppSettings:
    api: ApiSettings
    storage: StorageSettings
    ui: UiSettings
    server: ServerSettings


def _float_from_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    api = ApiSettings(
        base_url=os.getenv("SALON_API_BASE_URL", "http://localhost:5170/api"),
        token=os.getenv("SALON_API_TOKEN") or None,
        timeout_seconds=_float_from_env("SALON_API_TIMEOUT_SECONDS", 10.0),
    )

    storage = StorageSettings(
        backend=os.getenv("SALON_STORAGE_BACKEND", "api").strip().lower(),
        local_path=Path(os.getenv("SALON_LOCAL_STORE_PATH", str(DATA_DIR / "events.json"))),
    )

    ui = UiSettings(
        app_name=os.getenv("SALON_APP_NAME", "Salon Calendar"),
        organization=os.getenv("SALON_APP_ORG", "SalonCalendar"),
        narrow_viewport_px=int(os.getenv("SALON_NARROW_VIEWPORT_PX", "768")),
    )

    server = ServerSettings(
        host=os.getenv("SALON_SERVER_HOST", "127.0.0.1"),
        port=int(os.getenv("SALON_SERVER_PORT", "5170")),
        token=os.getenv("SALON_SERVER_TOKEN") or None,
    )

    return AppSettings(api=api, storage=storage, ui=ui, server=server)
