"""
Process configuration read from environment variables.

Every value has a local default so `uvicorn main:app` works out of the box
next to a `database.db` file.
"""

from __future__ import annotations

import os

DEFAULT_POPULAR_CATEGORY_IDS = (1, 3, 5, 10)


def _env_str(name: str, default: str) -> str:
    return os.environ.get(name, "").strip() or default


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float | None) -> float | None:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name, "").strip().lower()
    if not raw:
        return default
    return raw in {"1", "true", "yes", "on"}


def _env_int_list(name: str, default: tuple[int, ...]) -> tuple[int, ...]:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        values = tuple(int(part) for part in raw.split(",") if part.strip())
    except ValueError:
        return default
    return values or default


def database_path() -> str:
    return _env_str("DATABASE_PATH", "database.db")


def server_addr() -> str:
    return _env_str("SERVER_ADDR", "0.0.0.0:8080")


def bind_host_port() -> tuple[str, int]:
    """
    Split SERVER_ADDR ("host:port") for uvicorn. A bare host keeps port 8080.
    """
    host, sep, port = server_addr().rpartition(":")
    if not sep:
        return port, 8080
    try:
        return host or "0.0.0.0", int(port)
    except ValueError:
        return host or "0.0.0.0", 8080


def cors_enabled() -> bool:
    return _env_bool("ENABLE_CORS", True)


def log_level() -> str:
    return _env_str("LOG_LEVEL", "INFO").upper()


def static_dir() -> str:
    return _env_str("STATIC_DIR", "static")


def db_lock_timeout_s() -> float | None:
    # None means wait for the lock indefinitely.
    value = _env_float("DB_LOCK_TIMEOUT_S", None)
    if value is not None and value < 0:
        return None
    return value


def popular_category_ids() -> tuple[int, ...]:
    return _env_int_list("POPULAR_CATEGORY_IDS", DEFAULT_POPULAR_CATEGORY_IDS)


def popular_sample_size() -> int:
    return max(1, _env_int("POPULAR_SAMPLE_SIZE", 20))


def search_default_limit() -> int:
    return max(1, _env_int("SEARCH_DEFAULT_LIMIT", 50))


def search_max_limit() -> int:
    return max(1, _env_int("SEARCH_MAX_LIMIT", 100))
