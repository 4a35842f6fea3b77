"""
Box Office API - FastAPI application.

Provides endpoints for:
- Looking up a movie on OMDB by title or IMDb id
- Looking up a movie on TMDB by id or title
- Batch lookups of several titles against the configured provider
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.deps import get_cors_origins, get_lookup_client
from api.routers import lookups

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown events."""
    logger.info("Starting up Box Office API...")
    yield
    logger.info("Shutting down Box Office API...")
    if get_lookup_client.cache_info().currsize:
        get_lookup_client().close()


app = FastAPI(
    title="Box Office API",
    description="Normalized OMDB and TMDB movie metadata for static pages",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS configuration
# The static page is served from another origin (e.g. GitHub Pages).
# If no origins configured, allows all origins but disables credentials.
cors_origins = get_cors_origins()
allow_credentials = len(cors_origins) > 0

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins if cors_origins else ["*"],
    allow_credentials=allow_credentials,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

app.include_router(lookups.router, prefix="/api/v1")


@app.get("/")
def root():
    """Health check endpoint."""
    return {"status": "ok", "service": "boxoffice"}


@app.get("/health")
def health():
    """Health check endpoint."""
    return {"status": "healthy"}
