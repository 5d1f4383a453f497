"""
Application error taxonomy.

Services raise these; `main.py` turns them into envelope responses. The
`detail` is for the server log only, clients get `public_message`.
"""

from __future__ import annotations

from fastapi import status


class AppError(RuntimeError):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    public_message: str = "Internal server error"

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail or self.public_message
        super().__init__(self.detail)


class DatabaseError(AppError):
    """Any failure talking to or querying the store."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    public_message = "Database error"


class CommandNotFound(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    public_message = "Command not found"


class InvalidInput(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    public_message = "Invalid input"


class InternalError(AppError):
    """Infrastructure faults unrelated to the store (e.g. the connection lock)."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    public_message = "Internal server error"
