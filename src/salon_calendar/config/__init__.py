"""Configuration models and helpers."""

from __future__ import annotations

from .paths import APP_NAME, DATA_DIR, ensure_data_dir
from .settings import ApiSettings, AppSettings, ServerSettings, StorageSettings, UiSettings, get_settings
from .theme import AppPalette

__all__ = [
    "APP_NAME",
    "ApiSettings",
    "AppPalette",
    "AppSettings",
    "DATA_DIR",
    "ServerSettings",
    "StorageSettings",
    "UiSettings",
    "ensure_data_dir",
    "get_settings",
]
