"""
Runtime configuration read from environment variables.
"""

import os


# Database URL for saved divisions
DATABASE_URL = os.getenv(
    "DATABASE_URL",
    "sqlite+aiosqlite:///./baseball_elimination.db"
)

# Handle Railway PostgreSQL URL format
if DATABASE_URL.startswith("postgres://"):
    DATABASE_URL = DATABASE_URL.replace("postgres://", "postgresql+asyncpg://", 1)
elif DATABASE_URL.startswith("postgresql://") and "+asyncpg" not in DATABASE_URL:
    DATABASE_URL = DATABASE_URL.replace("postgresql://", "postgresql+asyncpg://", 1)

SQL_ECHO = os.getenv("SQL_ECHO", "false").lower() == "true"

# In production, replace with specific frontend URL
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "http://localhost:5173,http://localhost:3000").split(",")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# HTTP timeout in seconds for remote division files
LOADER_TIMEOUT = float(os.getenv("LOADER_TIMEOUT", "30.0"))
