"""
SQLite access helpers (raw SQL) over one shared, read-only connection.

This module owns the connection. FastAPI opens it on startup and closes it on
shutdown (see `api/main.py`).

Every statement runs in FastAPI's thread pool while holding a single lock, so
at most one query executes against the store at any time.

SQL parameter style:
- sqlite3 uses `?` positional placeholders or `:name` named placeholders.
"""

from __future__ import annotations

import logging
import sqlite3
import threading
from collections.abc import Callable, Mapping, Sequence
from pathlib import Path
from typing import Any, TypeVar

from fastapi.concurrency import run_in_threadpool

from . import errors, schema, settings

logger = logging.getLogger(__name__)

Params = Sequence[Any] | Mapping[str, Any]
T = TypeVar("T")

_conn: sqlite3.Connection | None = None
_lock = threading.Lock()


def _read_only_uri(path: str) -> str:
    return f"{Path(path).resolve().as_uri()}?mode=ro"


def init_connection(path: str | None = None) -> None:
    """
    Open the store read-only and validate its schema.

    A missing file or unreadable store raises `DatabaseError`; callers treat
    that as fatal.
    """
    global _conn
    if _conn is not None:
        return None

    db_path = path or settings.database_path()
    logger.info("Initializing database connection to: %s", db_path)
    try:
        conn = sqlite3.connect(_read_only_uri(db_path), uri=True, check_same_thread=False)
    except sqlite3.Error as exc:
        logger.error("Failed to open database at %s: %s", db_path, exc)
        raise errors.DatabaseError(f"Failed to open database at {db_path}: {exc}") from exc

    conn.row_factory = sqlite3.Row
    try:
        schema.validate_schema(conn)
    except errors.DatabaseError:
        conn.close()
        raise

    _conn = conn
    logger.info("Database connection established successfully")


def close_connection() -> None:
    global _conn
    if _conn is None:
        return None
    with _lock:
        _conn.close()
        _conn = None


def connection() -> sqlite3.Connection:
    if _conn is None:
        raise errors.InternalError("Database connection is not initialized. Call init_connection() on startup.")
    return _conn


def _locked(fn: Callable[[sqlite3.Connection], T]) -> T:
    conn = connection()
    timeout = settings.db_lock_timeout_s()
    acquired = _lock.acquire() if timeout is None else _lock.acquire(timeout=timeout)
    if not acquired:
        logger.error("Failed to acquire database lock within %.3fs", timeout)
        raise errors.InternalError("Database lock error")
    try:
        return fn(conn)
    except sqlite3.Error as exc:
        raise errors.DatabaseError(str(exc)) from exc
    finally:
        _lock.release()


def _row_to_dict(row: sqlite3.Row) -> dict[str, Any]:
    return dict(row)


async def fetch_one(sql: str, params: Params = ()) -> dict[str, Any] | None:
    """
    Run a query and return a single row as a dict (or None).
    """

    def run(conn: sqlite3.Connection) -> dict[str, Any] | None:
        row = conn.execute(sql, params).fetchone()
        return _row_to_dict(row) if row is not None else None

    return await run_in_threadpool(_locked, run)


async def fetch_all(sql: str, params: Params = ()) -> list[dict[str, Any]]:
    """
    Run a query and return all rows as a list of dicts.
    """

    def run(conn: sqlite3.Connection) -> list[dict[str, Any]]:
        return [_row_to_dict(r) for r in conn.execute(sql, params).fetchall()]

    return await run_in_threadpool(_locked, run)


async def fetch_value(sql: str, params: Params = ()) -> Any:
    """
    Run a query and return the first column of the first row (or None).
    """

    def run(conn: sqlite3.Connection) -> Any:
        row = conn.execute(sql, params).fetchone()
        return row[0] if row is not None else None

    return await run_in_threadpool(_locked, run)
