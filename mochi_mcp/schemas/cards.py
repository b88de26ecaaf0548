"""Pydantic-схемы карточек Mochi."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import AfterValidator, BeforeValidator, Field, StrictBool, constr, model_validator

from .base import WireModel


NonEmptyStr = constr(strip_whitespace=True, min_length=1)


class CardFieldValue(WireModel):
    """Значение поля шаблона на карточке."""

    id: NonEmptyStr
    value: str


def _coerce_field_values(value: Any) -> Any:
    """Разрешает короткую запись ``{"field-id": "значение"}``."""

    if not isinstance(value, Mapping):
        return value

    normalized: Dict[str, Any] = {}
    for key, entry in value.items():
        if isinstance(entry, str):
            entry = {"id": key, "value": entry}
        elif isinstance(entry, Mapping) and "id" not in entry:
            entry = {**entry, "id": key}
        normalized[key] = entry
    return normalized


def _check_field_ids(value: Dict[str, CardFieldValue]) -> Dict[str, CardFieldValue]:
    for key, entry in value.items():
        if entry.id != key:
            raise ValueError(f"field id {entry.id!r} does not match its key {key!r}")
    return value


FieldValues = Annotated[
    Dict[str, CardFieldValue],
    BeforeValidator(_coerce_field_values),
    AfterValidator(_check_field_ids),
]


Tags = List[NonEmptyStr]


def _coerce_trashed(value: Any) -> Any:
    if value is True:
        return "true"
    return value


class CreateCardArgs(WireModel):
    """Аргументы инструмента ``create-card`` и тело ``POST /cards``."""

    content: str = Field(
        min_length=1,
        description="Markdown content of the card. Separate front from back with `\\n---\\n`.",
    )
    deck_id: NonEmptyStr = Field(
        alias="deck-id", description="The deck ID that the card belongs to."
    )
    template_id: Optional[NonEmptyStr] = Field(
        default=None,
        alias="template-id",
        description="Optional template ID. When set, `fields` must use that template's field ids.",
    )
    manual_tags: Optional[Tags] = Field(
        default=None, alias="manual-tags", description="Tags to attach to the card."
    )
    fields: Optional[FieldValues] = Field(
        default=None,
        description="Template field values keyed by field id: {field-id: {id, value}}.",
    )
    archived: Optional[bool] = Field(default=None, alias="archived?")
    review_reverse: Optional[bool] = Field(default=None, alias="review-reverse?")
    pos: Optional[str] = None


class UpdateCardArgs(WireModel):
    """Аргументы инструмента ``update-card``.

    ``card-id`` уходит в путь запроса, остальные переданные поля попадают в тело.
    Мягкое удаление выполняется установкой ``trashed?`` в ``"true"``.
    """

    card_id: NonEmptyStr = Field(alias="card-id", description="ID of the card to update.")
    content: Optional[str] = Field(default=None, min_length=1)
    deck_id: Optional[NonEmptyStr] = Field(
        default=None, alias="deck-id", description="Move the card to another deck."
    )
    template_id: Optional[NonEmptyStr] = Field(default=None, alias="template-id")
    manual_tags: Optional[Tags] = Field(default=None, alias="manual-tags")
    archived: Optional[bool] = Field(default=None, alias="archived?")
    trashed: Annotated[Optional[Literal["true"]], BeforeValidator(_coerce_trashed)] = Field(
        default=None,
        alias="trashed?",
        description='Set to "true" to move the card to the trash (soft delete).',
    )
    fields: Optional[FieldValues] = None

    @model_validator(mode="after")
    def _require_changes(self) -> "UpdateCardArgs":
        if not self.model_fields_set - {"card_id"}:
            raise ValueError("at least one field to update must be provided")
        return self

    def body(self) -> Dict[str, Any]:
        """Только явно переданные поля, без ``card-id``."""

        return self.model_dump(
            by_alias=True, exclude_unset=True, exclude={"card_id"}, mode="json"
        )


class GetCardArgs(WireModel):
    card_id: NonEmptyStr = Field(alias="card-id")


class ListCardsArgs(WireModel):
    """Параметры ``GET /cards``."""

    deck_id: Optional[NonEmptyStr] = Field(
        default=None, alias="deck-id", description="Only return cards for the specified deck ID."
    )
    limit: Optional[int] = Field(
        default=None,
        ge=1,
        le=100,
        description="Number of cards to return per page (1-100, default 10).",
    )
    bookmark: Optional[str] = Field(
        default=None, description="Cursor for pagination from a previous list request."
    )

    def query(self) -> Dict[str, Any]:
        return self.to_wire()


class Card(WireModel):
    id: str
    name: str
    content: str
    deck_id: str = Field(alias="deck-id")
    tags: List[str]
    fields: Optional[Dict[str, Any]] = None
    template_id: Optional[str] = Field(default=None, alias="template-id")
    archived: Optional[StrictBool] = Field(default=None, alias="archived?")
    trashed: Optional[Union[StrictBool, str]] = Field(default=None, alias="trashed?")


class ListCardsResponse(WireModel):
    bookmark: Optional[str] = None
    docs: List[Card]


__all__ = [
    "Card",
    "CardFieldValue",
    "CreateCardArgs",
    "FieldValues",
    "GetCardArgs",
    "ListCardsArgs",
    "ListCardsResponse",
    "UpdateCardArgs",
]
