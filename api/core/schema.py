"""
Startup schema check.

Missing tables are only warned about: some deployments ship a reduced
database, and the affected endpoints then return empty results or errors.
"""

from __future__ import annotations

import logging
import sqlite3

from . import errors

logger = logging.getLogger(__name__)

REQUIRED_TABLES = (
    "Command",
    "CommandSection",
    "Tip",
    "TipSection",
    "BasicCategory",
    "BasicGroup",
    "BasicCommand",
)


def validate_schema(conn: sqlite3.Connection) -> list[str]:
    """
    Check that every required table exists and return the missing ones.

    Storage errors during the check raise `DatabaseError`.
    """
    missing: list[str] = []
    for table in REQUIRED_TABLES:
        try:
            row = conn.execute(
                "SELECT COUNT(*) FROM sqlite_master WHERE type = 'table' AND name = ?",
                (table,),
            ).fetchone()
        except sqlite3.Error as exc:
            logger.error("Error validating table '%s': %s", table, exc)
            raise errors.DatabaseError(f"Error validating table '{table}': {exc}") from exc

        if row[0] == 0:
            logger.warning("Table '%s' not found in database", table)
            missing.append(table)
        else:
            logger.debug("Table '%s' found in database", table)
    return missing
