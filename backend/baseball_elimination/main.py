"""
Baseball Elimination Service - FastAPI Application

Main entry point for the web API.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.routes import eliminations_router, divisions_router
from .core import CORS_ORIGINS, configure_logging
from .db import create_tables


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    configure_logging()
    try:
        await create_tables()
    except Exception as e:
        logger.error(f"Failed to create tables on startup: {e}")
        # App still starts; stateless eliminations need no database
    yield
    # Shutdown


# Create FastAPI app
app = FastAPI(
    title="Baseball Elimination Service",
    description="Max-flow based detection of mathematically eliminated teams, with certificates of elimination.",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(eliminations_router, prefix="/api")
app.include_router(divisions_router, prefix="/api")


@app.get("/api/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": "1.0.0"}


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": "Baseball Elimination Service API",
        "version": "1.0.0",
        "docs": "/api/docs",
        "health": "/api/health"
    }
