"""
Random usage tips.
"""

from .router import router

__all__ = ["router"]
