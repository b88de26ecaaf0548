"""Настройка structlog.

Логи пишутся только в stderr: stdout занят stdio-транспортом MCP.
"""

from __future__ import annotations

import logging
import sys

import structlog


def configure_logging(level: str = "INFO") -> None:
    filter_level = logging.getLevelName(level.upper())
    if not isinstance(filter_level, int):
        filter_level = logging.INFO

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.format_exc_info,
            structlog.processors.KeyValueRenderer(
                key_order=["timestamp", "level", "logger_name", "event"]
            ),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(filter_level),
        logger_factory=structlog.WriteLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str):
    return structlog.get_logger(logger_name=name)


__all__ = ["configure_logging", "get_logger"]
