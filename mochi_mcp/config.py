"""Конфигурация и загрузка окружения MCP-сервера Mochi."""

from __future__ import annotations

import os
from typing import Optional

DEFAULT_BASE_URL = "https://app.mochi.cards/api/"
DEFAULT_TIMEOUT = 25.0


def _env_default(name: str, fallback: str) -> str:
    value = os.environ.get(name)
    if value is None:
        return fallback
    trimmed = value.strip()
    return trimmed or fallback


def _env_optional(name: str) -> Optional[str]:
    value = os.environ.get(name)
    if value is None:
        return None
    trimmed = value.strip()
    return trimmed or None


def _env_timeout(name: str, fallback: float) -> float:
    raw = _env_optional(name)
    if raw is None:
        return fallback
    try:
        value = float(raw)
    except ValueError:
        return fallback
    return value if value > 0 else fallback


def reload_from_env() -> None:
    global MOCHI_API_KEY, MOCHI_BASE_URL, MOCHI_TIMEOUT, LOG_LEVEL

    MOCHI_API_KEY = _env_optional("MOCHI_API_KEY") or _env_optional("MOCHI_TOKEN")
    MOCHI_BASE_URL = _env_default("MOCHI_BASE_URL", DEFAULT_BASE_URL)
    MOCHI_TIMEOUT = _env_timeout("MOCHI_TIMEOUT", DEFAULT_TIMEOUT)
    LOG_LEVEL = _env_default("LOG_LEVEL", "INFO").upper()


def resolve_api_key(cli_value: Optional[str] = None) -> Optional[str]:
    """Токен из командной строки важнее переменной окружения."""

    if cli_value is not None and cli_value.strip():
        return cli_value.strip()
    return MOCHI_API_KEY


reload_from_env()


__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT",
    "LOG_LEVEL",
    "MOCHI_API_KEY",
    "MOCHI_BASE_URL",
    "MOCHI_TIMEOUT",
    "reload_from_env",
    "resolve_api_key",
    "_env_default",
    "_env_optional",
]
