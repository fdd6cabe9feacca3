"""
Database module.
"""

from .database import (
    engine,
    async_session_maker,
    get_db,
    create_tables,
    drop_tables
)
from .models import Base, SavedDivision
from .repositories import SavedDivisionRepository, division_from_json

__all__ = [
    # Database
    "engine",
    "async_session_maker",
    "get_db",
    "create_tables",
    "drop_tables",
    # Models
    "Base",
    "SavedDivision",
    # Repositories
    "SavedDivisionRepository",
    "division_from_json",
]
