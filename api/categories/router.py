"""
Category browsing API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter

from core import envelope

from . import service

router = APIRouter(prefix="/api")


@router.get("/categories")
async def list_categories() -> dict:
    titles = await service.list_titles()
    return envelope.ok(titles)


@router.get("/categories/detailed")
async def list_categories_detailed() -> dict:
    categories = await service.list_detailed()
    return envelope.ok(categories)


@router.get("/category/{name:path}")
async def commands_by_category(name: str) -> dict:
    result = await service.commands_by_category(name)
    return envelope.ok(result.commands, message=result.message)
