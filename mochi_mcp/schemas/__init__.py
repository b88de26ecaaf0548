"""Публичный интерфейс схем адаптера Mochi."""

from .base import WireModel, format_validation_errors, parse_arguments, parse_response
from .cards import (
    Card,
    CardFieldValue,
    CreateCardArgs,
    GetCardArgs,
    ListCardsArgs,
    ListCardsResponse,
    UpdateCardArgs,
)
from .decks import Deck, ListDecksArgs, ListDecksResponse
from .templates import (
    GetTemplateArgs,
    ListTemplatesArgs,
    ListTemplatesResponse,
    Template,
    TemplateField,
    TemplateFieldOptions,
)


__all__ = [
    "Card",
    "CardFieldValue",
    "CreateCardArgs",
    "Deck",
    "GetCardArgs",
    "GetTemplateArgs",
    "ListCardsArgs",
    "ListCardsResponse",
    "ListDecksArgs",
    "ListDecksResponse",
    "ListTemplatesArgs",
    "ListTemplatesResponse",
    "Template",
    "TemplateField",
    "TemplateFieldOptions",
    "UpdateCardArgs",
    "WireModel",
    "format_validation_errors",
    "parse_arguments",
    "parse_response",
]
