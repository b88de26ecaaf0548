"""Сборка FastMCP-приложения: инструменты, ресурсы и подсказки."""

from typing import Any, Dict, Optional, Sequence

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.resources import Resource
from fastmcp.server.middleware import CallNext, Middleware, MiddlewareContext
from fastmcp.tools import Tool
from fastmcp.tools.tool import ToolResult
from mcp.types import TextContent
from pydantic import ConfigDict, Field

from .dispatch import ToolDispatcher
from .log import get_logger
from .prompts import draft_flashcard
from .resources import DECK_CARDS_URI_TEMPLATE, DECKS_URI, TEMPLATES_URI, read_resource
from .services import MochiClient
from .tools import ToolSpec

SERVER_NAME = "mochi-mcp"

logger = get_logger("mochi_mcp.server")


class DispatchedTool(Tool):
    """Инструмент FastMCP, который исполняется через ``ToolDispatcher``.

    Схема аргументов берётся из Pydantic-модели как есть, поэтому
    проверку аргументов и тексты ошибок целиком определяет диспетчер.
    Неудача возвращается клиенту как ``ToolError``, то есть результат с
    флагом ``isError``.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    dispatcher: ToolDispatcher = Field(exclude=True, repr=False)

    @classmethod
    def from_spec(cls, spec: ToolSpec, dispatcher: ToolDispatcher) -> "DispatchedTool":
        return cls(
            name=spec.name,
            title=spec.title,
            description=spec.description,
            parameters=spec.input_schema(),
            annotations=spec.annotations,
            dispatcher=dispatcher,
        )

    async def run(self, arguments: Dict[str, Any]) -> ToolResult:
        outcome = await self.dispatcher.call(self.name, arguments)
        if outcome.is_error:
            raise ToolError(outcome.text)
        return ToolResult(content=[TextContent(type="text", text=outcome.text)])


def deck_resource(client: MochiClient, deck_id: str, deck_name: str) -> Resource:
    uri = DECK_CARDS_URI_TEMPLATE.format(deck_id=deck_id)

    async def read_deck() -> str:
        return await read_resource(client, uri)

    return Resource.from_function(
        read_deck,
        uri=uri,
        name=f"{deck_name} (Deck ID: {deck_id})",
        description=f"Deck ID: {deck_id}",
        mime_type="application/json",
    )


class DeckResourceListing(Middleware):
    """Дополняет ``resources/list`` ресурсом на каждую неархивную колоду.

    Колоды запрашиваются у Mochi при каждом листинге, ошибка API
    уходит клиенту.
    """

    def __init__(self, client: MochiClient):
        self.client = client

    async def on_list_resources(
        self,
        context: MiddlewareContext,
        call_next: CallNext,
    ) -> Sequence[Resource]:
        resources = list(await call_next(context))
        decks = await self.client.list_decks()
        resources.extend(deck_resource(self.client, deck.id, deck.name) for deck in decks.docs)
        return resources


def create_app(client: MochiClient, *, name: str = SERVER_NAME) -> FastMCP:
    """Создаёт MCP-сервер, привязанный к одному клиенту Mochi."""

    app = FastMCP(name, middleware=[DeckResourceListing(client)])
    dispatcher = ToolDispatcher(client)

    for spec in dispatcher.tools.values():
        app.add_tool(DispatchedTool.from_spec(spec, dispatcher))

    @app.resource(
        DECKS_URI,
        name="decks",
        description="All non-archived Mochi decks",
        mime_type="application/json",
    )
    async def decks_resource() -> str:
        return await read_resource(client, DECKS_URI)

    @app.resource(
        TEMPLATES_URI,
        name="templates",
        description="All Mochi card templates with their fields",
        mime_type="application/json",
    )
    async def templates_resource() -> str:
        return await read_resource(client, TEMPLATES_URI)

    @app.resource(
        DECK_CARDS_URI_TEMPLATE,
        name="deck-cards",
        description="Cards of one deck (first page)",
        mime_type="application/json",
    )
    async def deck_cards_resource(deck_id: str) -> str:
        return await read_resource(client, DECK_CARDS_URI_TEMPLATE.format(deck_id=deck_id))

    @app.prompt(
        name="draft-flashcard",
        description="Draft one atomic flashcard from free text and save it with create-card",
    )
    def draft_flashcard_prompt(text: str, deck_id: Optional[str] = None) -> str:
        return draft_flashcard(text, deck_id)

    logger.debug("app_created", tools=len(dispatcher.tools))
    return app


__all__ = ["DeckResourceListing", "DispatchedTool", "SERVER_NAME", "create_app", "deck_resource"]
