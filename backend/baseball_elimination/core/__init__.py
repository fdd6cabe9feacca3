"""
Core configuration and logging utilities.
"""

from .config import DATABASE_URL, SQL_ECHO, CORS_ORIGINS, LOG_LEVEL, LOADER_TIMEOUT
from .logging import configure_logging

__all__ = [
    "DATABASE_URL",
    "SQL_ECHO",
    "CORS_ORIGINS",
    "LOG_LEVEL",
    "LOADER_TIMEOUT",
    "configure_logging",
]
