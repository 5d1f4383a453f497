"""
Tip API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter

from core import envelope

from . import service

router = APIRouter(prefix="/api")


@router.get("/random-tip")
async def random_tip() -> dict:
    tip = await service.random_tip()
    return envelope.ok(tip)
