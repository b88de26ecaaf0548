"""Каталог MCP-инструментов."""

from typing import List

from .base import ToolSpec, mutating, read_only
from .cards import CARD_TOOLS, create_card, get_card, list_cards, update_card
from .decks import DECK_TOOLS, list_decks
from .templates import TEMPLATE_TOOLS, get_template, list_templates


TOOLS: List[ToolSpec] = [*CARD_TOOLS, *DECK_TOOLS, *TEMPLATE_TOOLS]


__all__ = [
    "TOOLS",
    "ToolSpec",
    "create_card",
    "get_card",
    "get_template",
    "list_cards",
    "list_decks",
    "list_templates",
    "mutating",
    "read_only",
    "update_card",
]
