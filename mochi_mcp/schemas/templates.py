"""Pydantic-схемы шаблонов карточек Mochi."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import Field, StrictBool, constr

from .base import WireModel


class TemplateFieldOptions(WireModel):
    multi_line: Optional[StrictBool] = Field(default=None, alias="multi-line?")


class TemplateField(WireModel):
    """Описание поля шаблона.

    Ключ поля в ``Template.fields`` совпадает с ``id`` и используется как
    ключ ``fields`` при создании карточки по этому шаблону.
    """

    id: str
    name: str
    pos: str
    options: Optional[TemplateFieldOptions] = None


class Template(WireModel):
    id: str
    name: str
    content: str
    pos: str
    fields: Dict[str, TemplateField]


class ListTemplatesArgs(WireModel):
    """Параметры ``GET /templates``."""

    bookmark: Optional[str] = Field(
        default=None, description="Cursor for pagination from a previous list request."
    )

    def query(self) -> Dict[str, Any]:
        return self.to_wire()


class GetTemplateArgs(WireModel):
    template_id: constr(strip_whitespace=True, min_length=1) = Field(
        alias="template-id", description="ID of the template to fetch."
    )


class ListTemplatesResponse(WireModel):
    bookmark: Optional[str] = None
    docs: List[Template]


__all__ = [
    "GetTemplateArgs",
    "ListTemplatesArgs",
    "ListTemplatesResponse",
    "Template",
    "TemplateField",
    "TemplateFieldOptions",
]
