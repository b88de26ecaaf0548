"""MCP-сервер для карточек Mochi."""

from . import config
from .dispatch import ToolDispatcher, ToolOutcome
from .errors import (
    ArgumentValidationError,
    Failure,
    FailureKind,
    InvalidResource,
    MochiError,
    RemoteApiError,
    RemoteTimeoutError,
    SchemaViolation,
)
from .server import create_app
from .services import MochiClient


__all__ = [
    "ArgumentValidationError",
    "Failure",
    "FailureKind",
    "InvalidResource",
    "MochiClient",
    "MochiError",
    "RemoteApiError",
    "RemoteTimeoutError",
    "SchemaViolation",
    "ToolDispatcher",
    "ToolOutcome",
    "config",
    "create_app",
]
