# guestbook/core/config.py
from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

from .services import DEFAULT_DATE_FORMAT


@dataclass(frozen=True)
class Settings:
    date_format: str = DEFAULT_DATE_FORMAT
    log_level: str = "INFO"

    # Initial main window size
    window_width: int = 480
    window_height: int = 720


def _positive_int(name: str, default: int) -> int:
    raw = os.getenv(name, str(default)).strip()
    try:
        value = int(raw)
    except ValueError as e:
        raise RuntimeError(f"Invalid {name} value: {raw!r}. Expected an integer.") from e
    if value < 1:
        raise RuntimeError(f"{name} must be >= 1")
    return value


def _log_level(raw: str) -> str:
    level = raw.strip().upper()
    # getLevelName() maps unknown names to "Level X" strings
    if not isinstance(logging.getLevelName(level), int):
        raise RuntimeError(f"Invalid GUESTBOOK_LOG_LEVEL value: {raw!r}")
    return level


def load_settings(dotenv_path: str | None = None) -> Settings:
    # .env searched upward from the working directory; real environment variables win
    if dotenv_path is None:
        dotenv_path = find_dotenv(usecwd=True)
    load_dotenv(dotenv_path=dotenv_path, override=False)

    date_format = os.getenv("GUESTBOOK_DATE_FORMAT", DEFAULT_DATE_FORMAT)
    if not date_format.strip():
        raise RuntimeError("GUESTBOOK_DATE_FORMAT is empty")

    return Settings(
        date_format=date_format,
        log_level=_log_level(os.getenv("GUESTBOOK_LOG_LEVEL", "INFO")),
        window_width=_positive_int("GUESTBOOK_WINDOW_WIDTH", 480),
        window_height=_positive_int("GUESTBOOK_WINDOW_HEIGHT", 720),
    )
