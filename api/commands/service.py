"""
Command service (orchestration).

This is where we:
- validate search input and apply the limit policy
- map repository rows to Command records
- assemble command detail (sections + optional TLDR)
"""

from __future__ import annotations

import logging
from typing import Any

from core import errors, settings

from . import ranking, repository, schemas

logger = logging.getLogger(__name__)

# SQLite INTEGER range; ids outside it cannot exist in the store.
SQLITE_MIN_INT = -(2**63)
SQLITE_MAX_INT = 2**63 - 1


def _to_command(row: dict[str, Any]) -> schemas.Command:
    return schemas.Command(
        id=int(row["id"]),
        name=str(row["name"]),
        category=int(row["category"] or 0),
        description=str(row["description"] or ""),
    )


async def list_commands() -> list[schemas.Command]:
    logger.info("Fetching all commands for alphabetical listing")
    rows = await repository.list_commands()
    logger.info("Found %d commands for alphabetical listing", len(rows))
    return [_to_command(r) for r in rows]


async def get_command_detail(command_id: int) -> schemas.CommandDetail:
    logger.info("Fetching command details for id: %d", command_id)
    if not SQLITE_MIN_INT <= command_id <= SQLITE_MAX_INT:
        logger.warning("Command id %d is outside the storable range", command_id)
        raise errors.CommandNotFound(f"Command with id {command_id} not found")
    row = await repository.get_command(command_id)
    if row is None:
        logger.warning("Command with id %d not found", command_id)
        raise errors.CommandNotFound(f"Command with id {command_id} not found")

    command = _to_command(row)
    section_rows = await repository.list_sections(command_id)
    tldr = await repository.get_tldr(command_id)

    sections = [
        schemas.CommandSection(title=str(s["title"]), content=str(s["content"] or ""))
        for s in section_rows
    ]
    logger.info("Command %s found with %d sections", command.name, len(sections))
    return schemas.CommandDetail(
        id=command.id,
        name=command.name,
        category=command.category,
        description=command.description,
        sections=sections,
        tldr=str(tldr) if tldr is not None else None,
    )


async def search_commands(
    q: str | None,
    *,
    category: str | None = None,
    limit: int | None = None,
) -> list[schemas.Command]:
    query = ranking.normalize_query(q)
    effective_limit = ranking.effective_limit(limit)
    category = (category or "").strip() or None

    logger.info("Searching commands with query: %r (category=%s, limit=%d)", query, category, effective_limit)
    rows = await repository.search_commands(query, category=category, limit=effective_limit)
    if rows and logger.isEnabledFor(logging.DEBUG):
        top = ranking.tier_for_score(int(rows[0]["relevance"]))
        logger.debug("Top result %r scored as %s", rows[0]["name"], top.name if top else "no tier")
    logger.info("Found %d commands for search query: %s", len(rows), query)
    return [_to_command(r) for r in rows]


async def suggest_names(q: str | None) -> list[str]:
    prefix = (q or "").strip()
    if not prefix:
        return []
    logger.info("Fetching command suggestions for: %s", prefix)
    suggestions = await repository.suggest_names(prefix)
    logger.debug("Found %d suggestions for query: %s", len(suggestions), prefix)
    return suggestions


async def popular_commands() -> list[schemas.Command]:
    """
    Random sample from a fixed legacy-category whitelist.

    This is a placeholder selection policy, not usage-based popularity.
    """
    logger.info("Fetching popular commands")
    rows = await repository.sample_commands(
        settings.popular_category_ids(),
        limit=settings.popular_sample_size(),
    )
    logger.info("Found %d popular commands", len(rows))
    return [_to_command(r) for r in rows]
