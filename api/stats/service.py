"""
Stats service. Any failing count fails the whole response.
"""

from __future__ import annotations

import logging

from . import repository, schemas

logger = logging.getLogger(__name__)


async def app_stats() -> schemas.AppStats:
    logger.info("Fetching application statistics")
    total_commands = await repository.count_commands()
    legacy_categories = await repository.count_legacy_categories()
    total_tips = await repository.count_tips()
    total_basic_categories = await repository.count_basic_categories()

    logger.debug("Legacy numeric categories in use: %d (not reported)", legacy_categories)
    logger.info(
        "Stats: %d commands, %d categories, %d tips",
        total_commands,
        total_basic_categories,
        total_tips,
    )
    return schemas.AppStats(
        total_commands=total_commands,
        total_categories=total_basic_categories,
        total_tips=total_tips,
        total_basic_categories=total_basic_categories,
    )
