from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional, Tuple

from dotenv import find_dotenv, load_dotenv

DEFAULT_CORS_ORIGINS = ("http://localhost:5173", "http://127.0.0.1:5173")
DEFAULT_REPORT_FILENAME = "Rentenluecke-ETF-Rechner.pdf"
DEFAULT_REPORT_TITLE = "Rentenlücke & ETF-Sparplan Rechner"


@dataclass(frozen=True)
class Settings:
    env: str
    log_level: str
    cors_origins: Tuple[str, ...]
    report_filename: str
    report_title: str


def _env(key: str, default: str) -> str:
    # Empty values count as "not set" so a blank line in .env cannot wipe a default.
    value = os.getenv(key)
    if value is None or value.strip() == "":
        return default
    return value.strip()


def _split_origins(raw: Optional[str]) -> Tuple[str, ...]:
    if not raw:
        return DEFAULT_CORS_ORIGINS
    origins = tuple(part.strip() for part in raw.split(",") if part.strip())
    return origins or DEFAULT_CORS_ORIGINS


def load_settings() -> Settings:
    """
    Loads settings from environment variables, after merging a local .env file.
    """
    load_dotenv(find_dotenv(usecwd=True))

    return Settings(
        env=_env("APP_ENV", "dev"),
        log_level=_env("LOG_LEVEL", "INFO").upper(),
        cors_origins=_split_origins(os.getenv("CORS_ORIGINS")),
        report_filename=_env("REPORT_FILENAME", DEFAULT_REPORT_FILENAME),
        report_title=_env("REPORT_TITLE", DEFAULT_REPORT_TITLE),
    )
