"""
API route modules.
"""

from .eliminations_routes import router as eliminations_router
from .divisions_routes import router as divisions_router

__all__ = ["eliminations_router", "divisions_router"]
