"""
Command records returned by the command endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, field_serializer

from .legacy_categories import legacy_category_name


class Command(BaseModel):
    id: int
    name: str
    # Legacy numeric category; serialized as its display name.
    category: int
    description: str

    @field_serializer("category")
    def _category_display_name(self, category: int) -> str:
        return legacy_category_name(category)


class CommandSection(BaseModel):
    title: str
    content: str


class CommandDetail(Command):
    sections: list[CommandSection]
    tldr: str | None = None
