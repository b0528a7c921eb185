from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


def _get_env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value


def _get_env_int(name: str, default: int) -> int:
    raw = _get_env(name, None)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    log_level: str
    sentry_dsn: str | None
    max_description_chars: int
    max_title_chars: int
    scoring_config_path: str | None


settings = Settings(
    log_level=_get_env("LOG_LEVEL", "INFO") or "INFO",
    sentry_dsn=_get_env("SENTRY_DSN"),
    max_description_chars=_get_env_int("MAX_DESCRIPTION_CHARS", 50000),
    max_title_chars=_get_env_int("MAX_TITLE_CHARS", 300),
    scoring_config_path=_get_env("SCORING_CONFIG_PATH"),
)

if settings.max_description_chars <= 0 or settings.max_title_chars <= 0:
    raise RuntimeError("MAX_DESCRIPTION_CHARS and MAX_TITLE_CHARS must be positive integers.")

__all__ = ["Settings", "settings"]
