"""
BasicCategory records.

BasicCategory ids are a separate identity space from the legacy numeric
`Command.category`; the two are never interchanged.
"""

from __future__ import annotations

from pydantic import BaseModel


class BasicCategory(BaseModel):
    id: int
    title: str
    position: int
    description: str | None = None
    # Icons are chosen by the frontend; always absent here.
    icon: str | None = None
