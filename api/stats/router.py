"""
Stats API endpoint.
"""

from __future__ import annotations

from fastapi import APIRouter

from core import envelope

from . import service

router = APIRouter(prefix="/api")


@router.get("/stats")
async def stats() -> dict:
    return envelope.ok(await service.app_stats())
