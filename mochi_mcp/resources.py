"""Виртуальные ресурсы ``mochi://``."""

from __future__ import annotations

import json
import re
from typing import Any, List

from .errors import InvalidResource
from .schemas import ListCardsArgs
from .services import MochiClient

SCHEME = "mochi"
DECKS_URI = f"{SCHEME}://decks"
TEMPLATES_URI = f"{SCHEME}://templates"
DECK_CARDS_URI_TEMPLATE = f"{SCHEME}://decks/{{deck_id}}"

_DECK_CARDS_RE = re.compile(rf"^{SCHEME}://decks/(?P<deck_id>[^/]+)$")


def _to_json(value: Any) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False)


async def read_decks(client: MochiClient) -> str:
    decks = await client.list_decks()
    return _to_json([deck.model_dump(by_alias=True, mode="json") for deck in decks.docs])


async def read_templates(client: MochiClient) -> str:
    templates = await client.list_templates()
    return _to_json(
        [template.model_dump(by_alias=True, mode="json") for template in templates.docs]
    )


async def read_deck_cards(client: MochiClient, deck_id: str) -> str:
    response = await client.list_cards(ListCardsArgs.model_validate({"deck-id": deck_id}))
    cards: List[dict] = [
        {
            "id": card.id,
            "name": card.name,
            "content": card.content,
            "fields": card.fields,
        }
        for card in response.docs
    ]
    return _to_json(cards)


async def read_resource(client: MochiClient, uri: str) -> str:
    """Читает ресурс по URI; неизвестный URI приводит к ``InvalidResource``."""

    if uri == DECKS_URI:
        return await read_decks(client)
    if uri == TEMPLATES_URI:
        return await read_templates(client)

    match = _DECK_CARDS_RE.match(uri)
    if match:
        return await read_deck_cards(client, match.group("deck_id"))

    raise InvalidResource(uri)


__all__ = [
    "DECKS_URI",
    "DECK_CARDS_URI_TEMPLATE",
    "SCHEME",
    "TEMPLATES_URI",
    "read_deck_cards",
    "read_decks",
    "read_resource",
    "read_templates",
]
