"""
Tip service.
"""

from __future__ import annotations

import logging
from typing import Any

from core import errors

from . import repository, schemas

logger = logging.getLogger(__name__)


def _to_section(row: dict[str, Any]) -> schemas.TipSection:
    return schemas.TipSection(
        section_type=int(row["type"] or 0),
        data1=str(row["data1"] or ""),
        data2=str(row["data2"] or ""),
        extra=str(row["extra"] or ""),
    )


async def random_tip() -> schemas.Tip:
    logger.info("Fetching random tip")
    row = await repository.random_tip()
    if row is None:
        # An empty Tip table is a broken store, unlike a missing TLDR.
        logger.error("Failed to get random tip: Tip table is empty")
        raise errors.DatabaseError("Query returned no rows: Tip table is empty")

    tip_id = int(row["id"])
    sections = [_to_section(r) for r in await repository.list_sections(tip_id)]
    logger.info("Found random tip: %s with %d sections", row["title"], len(sections))
    return schemas.Tip(id=tip_id, title=str(row["title"]), sections=sections)
