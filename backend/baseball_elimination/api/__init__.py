"""
API module.
"""

from .routes import eliminations_router, divisions_router

__all__ = [
    "eliminations_router",
    "divisions_router",
]
