"""Сервисный слой: доступ к Mochi API."""

from .client import MochiClient

__all__ = ["MochiClient"]
