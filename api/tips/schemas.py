"""
Tip records.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class TipSection(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    section_type: int = Field(alias="type")
    data1: str
    data2: str
    extra: str


class Tip(BaseModel):
    id: int
    title: str
    sections: list[TipSection]
