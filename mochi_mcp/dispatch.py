"""Диспетчер вызовов инструментов.

Вызов всегда завершается ``ToolOutcome``: либо JSON-результатом, либо
тегированной ``Failure``. Исключения наружу не выходят.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Iterable, Optional

from pydantic import BaseModel

from .errors import Failure, FailureKind, classify, unknown_tool
from .log import get_logger
from .schemas import parse_arguments
from .services import MochiClient
from .tools import TOOLS, ToolSpec

logger = get_logger("mochi_mcp.dispatch")


class ToolOutcome(BaseModel):
    tool: str
    result: Optional[Any] = None
    failure: Optional[Failure] = None

    @property
    def is_error(self) -> bool:
        return self.failure is not None

    @property
    def text(self) -> str:
        if self.failure is not None:
            return self.failure.render()
        return json.dumps(self.result, indent=2, ensure_ascii=False)


class ToolDispatcher:
    """Связывает каталог инструментов с одним клиентом Mochi."""

    def __init__(self, client: MochiClient, tools: Iterable[ToolSpec] = TOOLS):
        self.client = client
        self._tools: Dict[str, ToolSpec] = {tool.name: tool for tool in tools}

    @property
    def tools(self) -> Dict[str, ToolSpec]:
        return dict(self._tools)

    async def call(self, name: str, arguments: Any = None) -> ToolOutcome:
        spec = self._tools.get(name)
        if spec is None:
            logger.warning("unknown_tool", tool=name)
            return ToolOutcome(tool=name, failure=unknown_tool(name))

        try:
            args = parse_arguments(spec.args_model, arguments)
            result = await spec.handler(self.client, args)
        except Exception as exc:
            failure = classify(exc)
            if failure.kind is FailureKind.UNKNOWN:
                logger.exception("tool_failed", tool=name)
            else:
                logger.warning(
                    "tool_failed", tool=name, kind=failure.kind.value, error=failure.message
                )
            return ToolOutcome(tool=name, failure=failure)

        payload = result.model_dump(by_alias=True, mode="json")
        logger.debug("tool_succeeded", tool=name)
        return ToolOutcome(tool=name, result=payload)


__all__ = ["ToolDispatcher", "ToolOutcome"]
