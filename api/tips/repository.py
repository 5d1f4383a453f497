"""
Tip SQL (raw).
"""

from __future__ import annotations

from typing import Any

from core import db


async def random_tip() -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        SELECT id, title
        FROM Tip
        ORDER BY RANDOM()
        LIMIT 1
        """
    )


async def list_sections(tip_id: int) -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT type, data1, data2, extra
        FROM TipSection
        WHERE tip_id = ?
        ORDER BY position
        """,
        (tip_id,),
    )
