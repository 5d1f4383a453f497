"""
Command listing, detail, search, suggestions and popular picks.
"""

from .router import router

__all__ = ["router"]
