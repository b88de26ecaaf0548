"""Описание инструмента MCP: имя, схема аргументов, обработчик и подсказки."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Type

from mcp.types import ToolAnnotations
from pydantic import BaseModel

Handler = Callable[[Any, Any], Awaitable[BaseModel]]


@dataclass(frozen=True)
class ToolSpec:
    name: str
    title: str
    description: str
    args_model: Type[BaseModel]
    handler: Handler
    annotations: ToolAnnotations

    def input_schema(self) -> Dict[str, Any]:
        return self.args_model.model_json_schema(by_alias=True)


def read_only(title: str) -> ToolAnnotations:
    return ToolAnnotations(
        title=title,
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    )


def mutating(title: str, *, destructive: bool) -> ToolAnnotations:
    return ToolAnnotations(
        title=title,
        readOnlyHint=False,
        destructiveHint=destructive,
        idempotentHint=False,
        openWorldHint=True,
    )


__all__ = ["Handler", "ToolSpec", "mutating", "read_only"]
