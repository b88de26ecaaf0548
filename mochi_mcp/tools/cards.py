"""Инструменты для карточек."""

from __future__ import annotations

from ..schemas import (
    Card,
    CreateCardArgs,
    GetCardArgs,
    ListCardsArgs,
    ListCardsResponse,
    UpdateCardArgs,
)
from ..services import MochiClient
from .base import ToolSpec, mutating, read_only


async def create_card(client: MochiClient, args: CreateCardArgs) -> Card:
    return await client.create_card(args)


async def update_card(client: MochiClient, args: UpdateCardArgs) -> Card:
    return await client.update_card(args)


async def get_card(client: MochiClient, args: GetCardArgs) -> Card:
    return await client.get_card(args.card_id)


async def list_cards(client: MochiClient, args: ListCardsArgs) -> ListCardsResponse:
    return await client.list_cards(args)


CARD_TOOLS = [
    ToolSpec(
        name="create-card",
        title="Create flashcard",
        description=(
            "Create a new flashcard in a deck. Markdown content; separate front "
            "from back with `\\n---\\n` or use cloze markers like `{{answer}}`. "
            "When `template-id` is set, pass template values in `fields` keyed by "
            "the template's field ids (see list-templates)."
        ),
        args_model=CreateCardArgs,
        handler=create_card,
        annotations=mutating("Create flashcard", destructive=False),
    ),
    ToolSpec(
        name="update-card",
        title="Update flashcard",
        description=(
            "Update an existing flashcard. Only the supplied fields change. "
            'To delete a card, set `trashed?` to "true"; to archive it, set '
            "`archived?` to true."
        ),
        args_model=UpdateCardArgs,
        handler=update_card,
        annotations=mutating("Update flashcard", destructive=True),
    ),
    ToolSpec(
        name="get-card",
        title="Get flashcard",
        description="Fetch a single flashcard by its ID.",
        args_model=GetCardArgs,
        handler=get_card,
        annotations=read_only("Get flashcard"),
    ),
    ToolSpec(
        name="list-cards",
        title="List flashcards",
        description=(
            "List flashcards, optionally for one deck, one page at a time "
            "(default 10 per page). Pass the returned `bookmark` to get the next page."
        ),
        args_model=ListCardsArgs,
        handler=list_cards,
        annotations=read_only("List flashcards"),
    ),
]


__all__ = ["CARD_TOOLS", "create_card", "get_card", "list_cards", "update_card"]
