"""
Display names for the legacy numeric `Command.category` field.

Presentation only: this table is never used to join or filter categories
(category browsing goes through the BasicCategory hierarchy instead).
"""

from __future__ import annotations

UNKNOWN_CATEGORY_NAME = "Other"

# Sentinel for records that have no legacy classification (BasicCommand rows).
NO_LEGACY_CATEGORY = 0

LEGACY_CATEGORY_NAMES: dict[int, str] = {
    1: "Miscellaneous",
    2: "System information",
    3: "System control",
    4: "Users & Groups",
    5: "Files & Folders",
    6: "Games",
    7: "Input",
    8: "Printing",
    9: "JSON",
    10: "Network",
    11: "Search & Find",
    12: "GIT",
    13: "SSH",
    14: "Video & Audio",
    15: "Package manager",
    16: "Hacking tools",
    17: "Terminal games",
    18: "Crypto currencies",
    19: "VIM Texteditor",
    20: "Emacs Texteditor",
    21: "Nano Texteditor",
    22: "Pico Texteditor",
    23: "Micro Texteditor",
}


def legacy_category_name(category: int) -> str:
    return LEGACY_CATEGORY_NAMES.get(category, UNKNOWN_CATEGORY_NAME)
