from __future__ import annotations

from pathlib import Path

from platformdirs import user_data_dir

APP_NAME = "Salon Calendar"
APP_AUTHOR = "SalonCalendar"
DATA_DIR = Path(user_data_dir(APP_NAME, APP_AUTHOR))


def ensure_data_dir() -> Path:
    DATA_DIR.mkdir(parents=True, exist_ok=True)
    return DATA_DIR
