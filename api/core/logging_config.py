"""
Logging setup for the API process.

Modules log through `logging.getLogger(__name__)`; this only wires the root
handler once at startup.
"""

from __future__ import annotations

import logging
import sys

from . import settings

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"

_configured = False


def configure_logging(level: str | None = None) -> None:
    global _configured
    if _configured:
        return None

    level_name = (level or settings.log_level()).upper()
    numeric_level = getattr(logging, level_name, None)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root = logging.getLogger()
    root.addHandler(handler)
    root.setLevel(numeric_level)
    _configured = True
