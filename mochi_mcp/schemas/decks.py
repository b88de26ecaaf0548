"""Pydantic-схемы колод Mochi."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from pydantic import Field, StrictBool, StrictFloat, StrictInt

from .base import WireModel


class ListDecksArgs(WireModel):
    """Параметры ``GET /decks``."""

    bookmark: Optional[str] = Field(
        default=None, description="Cursor for pagination from a previous list request."
    )

    def query(self) -> Dict[str, Any]:
        return self.to_wire()


class Deck(WireModel):
    """Колода; архивные колоды наружу не отдаются."""

    id: str
    sort: Union[StrictInt, StrictFloat]
    name: str
    archived: Optional[StrictBool] = Field(default=None, alias="archived?")


class ListDecksResponse(WireModel):
    bookmark: Optional[str] = None
    docs: List[Deck]

    def without_archived(self) -> "ListDecksResponse":
        visible = [deck for deck in self.docs if not deck.archived]
        return self.model_copy(update={"docs": visible})


__all__ = ["Deck", "ListDecksArgs", "ListDecksResponse"]
