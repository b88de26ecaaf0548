"""Ошибки адаптера и их классификация для MCP-ответов."""

from __future__ import annotations

from enum import Enum
from typing import Any, List, Mapping, Optional, Sequence, Union

from pydantic import BaseModel, Field


class MochiError(Exception):
    """Базовое исключение адаптера Mochi."""


class ArgumentValidationError(MochiError):
    """Аргументы инструмента не прошли проверку схемы."""

    def __init__(self, messages: Sequence[str]):
        self.messages = list(messages)
        super().__init__(", ".join(self.messages))


class SchemaViolation(MochiError):
    """Ответ Mochi API не соответствует ожидаемой схеме."""

    def __init__(self, messages: Sequence[str]):
        self.messages = list(messages)
        super().__init__(", ".join(self.messages))


RemoteErrors = Union[List[str], Mapping[str, Any], str]


def _join_remote_errors(errors: Any) -> str:
    if isinstance(errors, str):
        return errors
    if isinstance(errors, Mapping):
        return ", ".join(_join_remote_errors(value) for value in errors.values())
    if isinstance(errors, (list, tuple)):
        return ", ".join(_join_remote_errors(item) for item in errors)
    return str(errors)


class RemoteApiError(MochiError):
    """Mochi API ответил статусом вне диапазона 2xx.

    Тело ошибки бывает двух видов: список сообщений
    (``["Error 1", "Error 2"]``) или объект ``{"field": "message"}``.
    Оригинал сохраняется в ``errors``, склеенный текст в ``message``.
    """

    def __init__(self, errors: RemoteErrors, status_code: Optional[int]):
        self.errors = errors
        self.status_code = status_code
        self.message = _join_remote_errors(errors)
        super().__init__(self.message)


class RemoteTimeoutError(RemoteApiError):
    """Запрос к Mochi API не уложился в таймаут."""

    def __init__(self, timeout: float):
        self.timeout = timeout
        super().__init__(f"request timed out after {timeout:g}s", None)


class InvalidResource(MochiError):
    """Запрошен неизвестный URI ресурса."""

    def __init__(self, uri: str):
        self.uri = uri
        super().__init__(f"Invalid resource URI: {uri}")


class FailureKind(str, Enum):
    VALIDATION = "validation"
    SCHEMA_VIOLATION = "schema_violation"
    REMOTE_API = "remote_api"
    UNKNOWN_TOOL = "unknown_tool"
    UNKNOWN = "unknown"


class Failure(BaseModel):
    """Тегированный результат неудачного вызова инструмента."""

    kind: FailureKind
    message: str
    status_code: Optional[int] = None
    details: List[str] = Field(default_factory=list)

    def render(self) -> str:
        if self.kind is FailureKind.VALIDATION:
            return f"Validation error: {self.message}"
        if self.kind is FailureKind.SCHEMA_VIOLATION:
            return f"Invalid response from Mochi API: {self.message}"
        if self.kind is FailureKind.REMOTE_API:
            status = self.status_code if self.status_code is not None else "timeout"
            return f"Mochi API error ({status}): {self.message}"
        if self.kind is FailureKind.UNKNOWN_TOOL:
            return f"Unknown tool: {self.message}"
        return f"Error: {self.message}"


def unknown_tool(name: str) -> Failure:
    return Failure(kind=FailureKind.UNKNOWN_TOOL, message=name)


def classify(exc: BaseException) -> Failure:
    """Сопоставляет исключению тег ошибки."""

    if isinstance(exc, ArgumentValidationError):
        return Failure(
            kind=FailureKind.VALIDATION, message=str(exc), details=exc.messages
        )
    if isinstance(exc, SchemaViolation):
        return Failure(
            kind=FailureKind.SCHEMA_VIOLATION, message=str(exc), details=exc.messages
        )
    if isinstance(exc, RemoteApiError):
        return Failure(
            kind=FailureKind.REMOTE_API,
            message=exc.message,
            status_code=exc.status_code,
        )
    return Failure(kind=FailureKind.UNKNOWN, message=str(exc) or type(exc).__name__)


__all__ = [
    "ArgumentValidationError",
    "Failure",
    "FailureKind",
    "InvalidResource",
    "MochiError",
    "RemoteApiError",
    "RemoteErrors",
    "RemoteTimeoutError",
    "SchemaViolation",
    "classify",
    "unknown_tool",
]
