from __future__ import annotations

import os
from pathlib import Path


def catalog_path() -> Path | None:
    """Path of a JSON catalog file, or None to use the built-in catalog."""
    path = os.getenv("CAFE_CATALOG_PATH")

    if not path:
        return None

    return Path(path)


def log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO")
