"""Инструменты для колод."""

from __future__ import annotations

from ..schemas import ListDecksArgs, ListDecksResponse
from ..services import MochiClient
from .base import ToolSpec, read_only


async def list_decks(client: MochiClient, args: ListDecksArgs) -> ListDecksResponse:
    return await client.list_decks(args)


DECK_TOOLS = [
    ToolSpec(
        name="list-decks",
        title="List decks",
        description=(
            "List all non-archived decks. Pass the returned `bookmark` to get the "
            "next page."
        ),
        args_model=ListDecksArgs,
        handler=list_decks,
        annotations=read_only("List decks"),
    ),
]


__all__ = ["DECK_TOOLS", "list_decks"]
