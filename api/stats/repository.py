"""
Counting queries (raw SQL). Each count is an independent statement.
"""

from __future__ import annotations

from core import db


async def _count(sql: str) -> int:
    value = await db.fetch_value(sql)
    return int(value or 0)


async def count_commands() -> int:
    return await _count("SELECT COUNT(*) FROM Command")


async def count_legacy_categories() -> int:
    return await _count("SELECT COUNT(DISTINCT category) FROM Command")


async def count_tips() -> int:
    return await _count("SELECT COUNT(*) FROM Tip")


async def count_basic_categories() -> int:
    return await _count("SELECT COUNT(*) FROM BasicCategory")
