"""Pytest fixtures: a seeded SQLite command library and an API client over it."""

import sqlite3
from contextlib import ExitStack
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

import main

SCHEMA = """
CREATE TABLE Command (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    category INTEGER NOT NULL,
    name TEXT NOT NULL,
    description TEXT NOT NULL
);
CREATE TABLE CommandSection (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    title TEXT NOT NULL,
    content TEXT NOT NULL,
    command_id INTEGER NOT NULL
);
CREATE TABLE Tip (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    title TEXT NOT NULL,
    position INTEGER NOT NULL DEFAULT 0
);
CREATE TABLE TipSection (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    position INTEGER NOT NULL,
    type INTEGER NOT NULL,
    data1 TEXT,
    data2 TEXT,
    extra TEXT,
    tip_id INTEGER NOT NULL
);
CREATE TABLE BasicCategory (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    position INTEGER NOT NULL,
    title TEXT NOT NULL
);
CREATE TABLE BasicGroup (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    position INTEGER NOT NULL DEFAULT 0,
    description TEXT NOT NULL,
    category_id INTEGER NOT NULL
);
CREATE TABLE BasicCommand (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    command TEXT NOT NULL,
    mans TEXT NOT NULL DEFAULT '',
    group_id INTEGER NOT NULL
);
"""

COMMANDS = [
    # (id, category, name, description)
    (1, 1, "grep", "Search files for lines matching a pattern"),
    (2, 11, "egrep", "Extended pattern search, same as grep -E"),
    (3, 3, "pgrep", "Look up processes by name"),
    (4, 5, "ls", "List directory contents"),
    (5, 11, "find", "Search for files in a directory hierarchy, often piped into grep"),
    (6, 99, "zgrep", "Search compressed files"),
    (7, 10, "ping", "Send ICMP echo requests to network hosts"),
    (8, 11, "rg", "grep-like recursive search"),
    (9, 10, "grepcidr", "Filter IPv4 addresses against CIDR specifications"),
    (10, 1, "100%_done", "Literal percent and underscore in a name"),
]

COMMAND_SECTIONS = [
    # (title, content, command_id) in insertion order
    ("NAME", "grep - print lines that match patterns", 1),
    ("TLDR", "grep pattern file", 1),
    ("DESCRIPTION", "grep searches for PATTERNS in each FILE.", 1),
    ("OPTIONS", "-i ignore case", 1),
    ("DESCRIPTION", "List information about the FILEs.", 4),
    ("NAME", "ls - list directory contents", 4),
]

TIPS = [(1, "Quick Navigation")]

TIP_SECTIONS = [
    # (position, type, data1, data2, extra, tip_id)
    (2, 1, "Ctrl+E", "End of line", None, 1),
    (1, 0, "Use Ctrl+A to go to beginning of line", None, None, 1),
]

BASIC_CATEGORIES = [
    # (id, position, title)
    (1, 1, "One-liners"),
    (2, 0, "Files & Folders"),
    (3, 2, "Custom Stuff"),
]

BASIC_GROUPS = [
    # (id, description, category_id)
    (1, "List files", 2),
    (2, "Copy files", 2),
    (3, "One liners", 1),
]

BASIC_COMMANDS = [
    # (id, command, mans, group_id)
    (1, "ls -la\n# lists all files", "ls", 1),
    (2, "cp -r src dst", "cp", 2),
    (3, "  du -sh *  \n# sizes", "du", 1),
    (4, "echo hi", "echo", 3),
]


def create_database(path: Path, *, seed: bool = True, schema: str = SCHEMA) -> Path:
    conn = sqlite3.connect(path)
    try:
        conn.executescript(schema)
        if seed:
            seed_database(conn)
        conn.commit()
    finally:
        conn.close()
    return path


def seed_database(conn: sqlite3.Connection) -> None:
    conn.executemany("INSERT INTO Command (id, category, name, description) VALUES (?, ?, ?, ?)", COMMANDS)
    conn.executemany("INSERT INTO CommandSection (title, content, command_id) VALUES (?, ?, ?)", COMMAND_SECTIONS)
    conn.executemany("INSERT INTO Tip (id, title) VALUES (?, ?)", TIPS)
    conn.executemany(
        "INSERT INTO TipSection (position, type, data1, data2, extra, tip_id) VALUES (?, ?, ?, ?, ?, ?)",
        TIP_SECTIONS,
    )
    conn.executemany("INSERT INTO BasicCategory (id, position, title) VALUES (?, ?, ?)", BASIC_CATEGORIES)
    conn.executemany("INSERT INTO BasicGroup (id, description, category_id) VALUES (?, ?, ?)", BASIC_GROUPS)
    conn.executemany("INSERT INTO BasicCommand (id, command, mans, group_id) VALUES (?, ?, ?, ?)", BASIC_COMMANDS)


@pytest.fixture
def database_path(tmp_path):
    return create_database(tmp_path / "database.db")


@pytest.fixture
def make_client(monkeypatch):
    """Start the app (lifespan included) against an arbitrary database file."""
    with ExitStack() as stack:

        def _make(path: Path) -> TestClient:
            monkeypatch.setenv("DATABASE_PATH", str(path))
            return stack.enter_context(TestClient(main.app))

        yield _make


@pytest.fixture
def client(make_client, database_path):
    return make_client(database_path)
