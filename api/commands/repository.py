"""
Command SQL (raw).

This module contains SQLite queries for:
- the alphabetical command listing and command detail (sections, TLDR)
- relevance-ranked free-text search (see `ranking.py`)
- name suggestions and the popular-commands sample
"""

from __future__ import annotations

from typing import Any

from core import db

from . import ranking

EXCLUDED_SECTION_TITLE = "NAME"
TLDR_SECTION_TITLE = "TLDR"
SUGGESTION_LIMIT = 10


async def list_commands() -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT id, name, category, description
        FROM Command
        ORDER BY name
        """
    )


async def get_command(command_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        SELECT id, name, category, description
        FROM Command
        WHERE id = ?
        """,
        (command_id,),
    )


async def list_sections(command_id: int) -> list[dict[str, Any]]:
    """
    Sections in storage order, without NAME and without TLDR (see `get_tldr`).
    """
    return await db.fetch_all(
        """
        SELECT title, content
        FROM CommandSection
        WHERE command_id = ? AND title NOT IN (?, ?)
        ORDER BY id
        """,
        (command_id, EXCLUDED_SECTION_TITLE, TLDR_SECTION_TITLE),
    )


async def get_tldr(command_id: int) -> str | None:
    return await db.fetch_value(
        """
        SELECT content
        FROM CommandSection
        WHERE command_id = ? AND title = ?
        ORDER BY id
        LIMIT 1
        """,
        (command_id, TLDR_SECTION_TITLE),
    )


async def search_commands(query: str, *, category: str | None = None, limit: int = 50) -> list[dict[str, Any]]:
    """
    Candidates contain the query in name or description; ordered by relevance, then name.
    """
    params: dict[str, Any] = {**ranking.search_terms(query), "limit": limit}
    category_clause = ""
    if category is not None:
        category_clause = "AND category = :category"
        params["category"] = category

    return await db.fetch_all(
        f"""
        SELECT id, name, category, description,
        {ranking.relevance_case_sql()} AS relevance
        FROM Command
        WHERE {ranking.CANDIDATE_PREDICATE}
          {category_clause}
        ORDER BY relevance DESC, name ASC
        LIMIT :limit
        """,
        params,
    )


async def suggest_names(prefix: str, *, limit: int = SUGGESTION_LIMIT) -> list[str]:
    rows = await db.fetch_all(
        """
        SELECT DISTINCT name
        FROM Command
        WHERE name LIKE ? ESCAPE '\\'
        ORDER BY name
        LIMIT ?
        """,
        (f"{ranking.escape_like(prefix)}%", limit),
    )
    return [str(r["name"]) for r in rows]


async def sample_commands(category_ids: tuple[int, ...], *, limit: int) -> list[dict[str, Any]]:
    if not category_ids:
        return []
    placeholders = ", ".join("?" for _ in category_ids)
    return await db.fetch_all(
        f"""
        SELECT id, name, category, description
        FROM Command
        WHERE category IN ({placeholders})
        ORDER BY RANDOM()
        LIMIT ?
        """,
        (*category_ids, limit),
    )
