"""
Library statistics record.
"""

from __future__ import annotations

from pydantic import BaseModel


class AppStats(BaseModel):
    total_commands: int
    # Same value as total_basic_categories; the legacy count is not reported.
    total_categories: int
    total_tips: int
    total_basic_categories: int
