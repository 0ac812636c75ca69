from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Optional

from ..config.paths import DATA_DIR

logger = logging.getLogger(__name__)

TOKEN_FILE = DATA_DIR / "token"


class TokenStore:
    """Bearer token persisted between runs; an absent token is not an error."""

    def __init__(self, path: Optional[Path] = None, *, initial: Optional[str] = None) -> None:
        self._path = path or TOKEN_FILE
        self._lock = threading.Lock()
        self._token: Optional[str] = initial
        if self._token is None and self._path.exists():
            self._token = self._path.read_text(encoding="utf-8").strip() or None

    def get(self) -> Optional[str]:
        with self._lock:
            return self._token

    def set(self, token: str) -> None:
        token = token.strip()
        with self._lock:
            self._token = token or None
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(token + "\n", encoding="utf-8")

    def clear(self) -> None:
        with self._lock:
            self._token = None
            if self._path.exists():
                self._path.unlink()
        logger.info("Session token discarded")
