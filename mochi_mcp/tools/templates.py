"""Инструменты для шаблонов карточек."""

from __future__ import annotations

from ..schemas import GetTemplateArgs, ListTemplatesArgs, ListTemplatesResponse, Template
from ..services import MochiClient
from .base import ToolSpec, read_only


async def list_templates(
    client: MochiClient, args: ListTemplatesArgs
) -> ListTemplatesResponse:
    return await client.list_templates(args)


async def get_template(client: MochiClient, args: GetTemplateArgs) -> Template:
    return await client.get_template(args.template_id)


TEMPLATE_TOOLS = [
    ToolSpec(
        name="list-templates",
        title="List templates",
        description=(
            "List card templates with their fields. Field ids are the keys to use "
            "in `fields` when creating a card from a template."
        ),
        args_model=ListTemplatesArgs,
        handler=list_templates,
        annotations=read_only("List templates"),
    ),
    ToolSpec(
        name="get-template",
        title="Get template",
        description="Fetch a single card template, including its fields, by ID.",
        args_model=GetTemplateArgs,
        handler=get_template,
        annotations=read_only("Get template"),
    ),
]


__all__ = ["TEMPLATE_TOOLS", "get_template", "list_templates"]
