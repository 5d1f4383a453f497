"""
BasicCategory SQL (raw).

The hierarchy is BasicCategory -> BasicGroup -> BasicCommand.
"""

from __future__ import annotations

from typing import Any

from core import db


async def list_titles() -> list[str]:
    rows = await db.fetch_all(
        """
        SELECT title
        FROM BasicCategory
        ORDER BY position
        """
    )
    return [str(r["title"]) for r in rows]


async def list_categories() -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT id, title, position
        FROM BasicCategory
        ORDER BY position
        """
    )


async def find_category_id(title: str) -> int | None:
    value = await db.fetch_value(
        """
        SELECT id
        FROM BasicCategory
        WHERE title = ?
        ORDER BY id
        LIMIT 1
        """,
        (title,),
    )
    return int(value) if value is not None else None


async def list_basic_commands(category_id: int) -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT bc.id, bc.command, bc.mans, bg.description
        FROM BasicCommand bc
        JOIN BasicGroup bg ON bc.group_id = bg.id
        WHERE bg.category_id = ?
        ORDER BY bc.command
        """,
        (category_id,),
    )
