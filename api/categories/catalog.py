"""
Static descriptions for BasicCategory titles.

Titles not listed here are served without a description.
"""

from __future__ import annotations

BASIC_CATEGORY_DESCRIPTIONS: dict[str, str] = {
    "One-liners": "Useful linux command line one liners",
    "System information": "System and battery/cpu/memory/disk usage info on Linux",
    "System control": "Lock, unlock, start/stop bluetooth/wifi, shutdown, reboot system",
    "Users & Groups": "Create, delete, user, group, list, info",
    "Files & Folders": "File and directory operations",
    "Input": "Move, click, mouse, type, text, xdotool, ydotool, read, copy, clipboard",
    "Printing": "Printer management and printing commands",
    "JSON": "JSON processing and manipulation tools",
    "Network": "Network configuration and tools",
    "Search & Find": "Search and find files and content",
    "GIT": "Git version control commands",
    "SSH": "SSH connection and key management",
    "Video & Audio": "Video and audio processing tools",
    "Package manager": "Package management commands",
    "Hacking tools": "Security testing and hacking tools",
    "Terminal games": "Games that run in the terminal",
    "Crypto currencies": "Cryptocurrency related commands",
    "VIM Texteditor": "VIM text editor commands and shortcuts",
    "Emacs Texteditor": "Emacs text editor commands and shortcuts",
    "Nano Texteditor": "Nano text editor commands and shortcuts",
    "Pico Texteditor": "Pico text editor commands and shortcuts",
    "Micro Texteditor": "Micro text editor commands and shortcuts",
}


def description_for(title: str) -> str | None:
    return BASIC_CATEGORY_DESCRIPTIONS.get(title)
