"""Settings read from the environment (and a .env file, if present)."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_DIMENSIONS = "6,7,4,4"
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    dimensions: tuple[int, ...]
    log_level: str


def parse_dimensions(text: str) -> tuple[int, ...]:
    """Parse a comma-separated list of sizes such as "7,6"."""
    parts = [p.strip() for p in text.split(",") if p.strip()]
    try:
        return tuple(int(p) for p in parts)
    except ValueError:
        raise ValueError(f"Invalid board dimensions: {text!r}") from None


def parse_log_level(text: str) -> str:
    level = text.strip().upper()
    if level not in logging.getLevelNamesMapping():
        raise ValueError(f"Invalid log level: {text!r}")
    return level


def load_settings() -> Settings:
    load_dotenv()
    return Settings(
        dimensions=parse_dimensions(os.getenv("CONNECT_ND_DIMENSIONS", DEFAULT_DIMENSIONS)),
        log_level=parse_log_level(os.getenv("CONNECT_ND_LOG_LEVEL", DEFAULT_LOG_LEVEL)),
    )
