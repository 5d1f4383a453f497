"""
Category browsing over the BasicCategory hierarchy.
"""

from .router import router

__all__ = ["router"]
