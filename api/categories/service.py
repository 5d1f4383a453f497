"""
Category resolver.

Browsing uses the BasicCategory hierarchy only. An unknown title is a soft
miss: an empty success carrying a message, never an error.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from commands import schemas as command_schemas
from commands.legacy_categories import NO_LEGACY_CATEGORY

from . import catalog, repository, schemas

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CategoryCommands:
    commands: list[command_schemas.Command]
    message: str | None = None


def display_name(command_text: str | None) -> str:
    """
    First line of a (possibly multi-line) BasicCommand text, trimmed.
    """
    return (command_text or "").split("\n", 1)[0].strip()


def _to_command(row: dict[str, Any]) -> command_schemas.Command:
    return command_schemas.Command(
        id=int(row["id"]),
        name=display_name(row["command"]),
        category=NO_LEGACY_CATEGORY,
        description=str(row["description"] or ""),
    )


async def list_titles() -> list[str]:
    logger.info("Fetching all categories")
    titles = await repository.list_titles()
    logger.info("Found %d categories", len(titles))
    return titles


async def list_detailed() -> list[schemas.BasicCategory]:
    logger.info("Fetching detailed categories from BasicCategory table")
    rows = await repository.list_categories()
    categories = [
        schemas.BasicCategory(
            id=int(r["id"]),
            title=str(r["title"]),
            position=int(r["position"]),
            description=catalog.description_for(str(r["title"])),
        )
        for r in rows
    ]
    logger.info("Found %d detailed categories", len(categories))
    return categories


async def commands_by_category(title: str) -> CategoryCommands:
    logger.info("Fetching commands for BasicCategory: %s", title)
    category_id = await repository.find_category_id(title)
    if category_id is None:
        logger.warning("BasicCategory '%s' not found", title)
        return CategoryCommands(commands=[], message=f"Category '{title}' not found")

    logger.debug("Found BasicCategory '%s' with ID: %d", title, category_id)
    rows = await repository.list_basic_commands(category_id)
    commands = [_to_command(r) for r in rows]
    logger.info("Found %d basic commands for category '%s' (ID: %d)", len(commands), title, category_id)
    return CategoryCommands(commands=commands)
