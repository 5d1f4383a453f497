"""
Uniform response envelope: {"success": bool, "data": T | null, "message": str | null}.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


def _dump(value: Any) -> Any:
    # Optional record fields (tldr, description, icon) are omitted when absent.
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(value, (list, tuple)):
        return [_dump(item) for item in value]
    return value


def ok(data: Any, message: str | None = None) -> dict[str, Any]:
    return {"success": True, "data": _dump(data), "message": message}


def failure(message: str) -> dict[str, Any]:
    return {"success": False, "data": None, "message": message}
