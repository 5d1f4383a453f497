"""
Command API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Query

from core import envelope

from . import service

router = APIRouter(prefix="/api")


@router.get("/search")
async def search(
    q: str = Query(...),
    category: str | None = None,
    limit: int | None = None,
) -> dict:
    results = await service.search_commands(q, category=category, limit=limit)
    return envelope.ok(results)


@router.get("/suggestions")
async def suggestions(q: str = Query(...)) -> dict:
    names = await service.suggest_names(q)
    return envelope.ok(names)


@router.get("/popular")
async def popular() -> dict:
    results = await service.popular_commands()
    return envelope.ok(results)


@router.get("/commands")
async def list_commands() -> dict:
    results = await service.list_commands()
    return envelope.ok(results)


@router.get("/commands/{command_id}")
async def get_command(command_id: int) -> dict:
    detail = await service.get_command_detail(command_id)
    return envelope.ok(detail)
