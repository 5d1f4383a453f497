"""
Library statistics.
"""

from .router import router

__all__ = ["router"]
