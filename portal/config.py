# portal/config.py
from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

ROOT = Path(__file__).resolve().parents[1]

# Load .env so local overrides work without exporting variables
load_dotenv(ROOT / ".env")


def _int_env(name: str, default: int) -> int:
    raw = (os.getenv(name) or "").strip()
    try:
        return int(raw) if raw else default
    except ValueError:
        return default


SECRET_KEY = os.getenv("SECRET_KEY") or "dev-secret-change-me"
MAX_CONTENT_LENGTH = _int_env("MAX_CONTENT_LENGTH", 2 * 1024 * 1024)   # ~2 MB of JSON
MENUSCAN_MAX_TEXT_CHARS = _int_env("MENUSCAN_MAX_TEXT_CHARS", 100_000)
MENUSCAN_LOG_LEVEL = (os.getenv("MENUSCAN_LOG_LEVEL") or "INFO").upper()
