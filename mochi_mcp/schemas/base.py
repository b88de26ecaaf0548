"""Базовая модель и двухфазная проверка данных на границах процесса."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, List, Type, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from ..errors import ArgumentValidationError, SchemaViolation


class WireModel(BaseModel):
    """Модель с дефисными ключами Mochi API в качестве алиасов.

    Лишние ключи молча отбрасываются, заполнять модель можно как по
    алиасу (``deck-id``), так и по имени атрибута (``deck_id``).
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    def to_wire(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


T_Model = TypeVar("T_Model", bound=BaseModel)


def _format_location(loc) -> str:
    return ".".join(str(part) for part in loc)


def _format_error(error: Mapping[str, Any]) -> str:
    location = _format_location(error.get("loc", ()))
    kind = error.get("type", "")
    message = str(error.get("msg", "")).strip()
    if kind == "value_error" and message.startswith("Value error, "):
        message = message[len("Value error, "):]

    if not location:
        return message
    if kind == "missing":
        return f"field '{location}' is missing"
    if kind in ("string_too_short", "too_short"):
        ctx = error.get("ctx") or {}
        if ctx.get("min_length") == 1:
            return f"field '{location}' must not be empty"
    if message:
        message = message[0].lower() + message[1:]
    return f"field '{location}': {message}"


def format_validation_errors(exc: PydanticValidationError) -> List[str]:
    """Переводит ошибки Pydantic в человекочитаемые строки, по одной на поле."""

    messages: List[str] = []
    for error in exc.errors():
        text = _format_error(error)
        if text not in messages:
            messages.append(text)
    return messages


def parse_arguments(model: Type[T_Model], arguments: Any) -> T_Model:
    """Проверяет входящий набор аргументов инструмента."""

    if arguments is None:
        arguments = {}
    if not isinstance(arguments, Mapping):
        raise ArgumentValidationError(
            [f"arguments must be an object, got {type(arguments).__name__}"]
        )
    try:
        return model.model_validate(dict(arguments))
    except PydanticValidationError as exc:
        raise ArgumentValidationError(format_validation_errors(exc)) from exc


def parse_response(model: Type[T_Model], payload: Any) -> T_Model:
    """Проверяет ответ Mochi API перед тем, как отдать его дальше."""

    try:
        return model.model_validate(payload)
    except PydanticValidationError as exc:
        raise SchemaViolation(format_validation_errors(exc)) from exc


__all__ = [
    "WireModel",
    "format_validation_errors",
    "parse_arguments",
    "parse_response",
]
