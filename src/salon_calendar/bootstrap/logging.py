from __future__ import annotations

import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Optional

from ..config.paths import DATA_DIR

LOG_LEVEL = os.getenv("SALON_LOG_LEVEL", "INFO").upper()
LOG_DIR = Path(os.getenv("SALON_LOG_DIR", DATA_DIR / "logs"))


def configure_logging(*, level: Optional[str] = None) -> None:
    """Configure application-wide logging with a dated file next to console output."""

    resolved_level = getattr(logging, (level or LOG_LEVEL).upper(), logging.INFO)
    LOG_DIR.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d")
    log_path = LOG_DIR / f"salon-calendar-{timestamp}.log"

    handlers: list[logging.Handler] = [
        logging.StreamHandler(),
        logging.FileHandler(log_path, encoding="utf-8"),
    ]

    logging.basicConfig(
        level=resolved_level,
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        handlers=handlers,
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)
