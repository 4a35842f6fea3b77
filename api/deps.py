"""
Dependency injection for the lookup client and other shared resources.
"""
from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from boxoffice.config import ClientConfig
from boxoffice.lookup import MetadataLookupClient

logger = logging.getLogger(__name__)


@lru_cache
def get_client_config() -> ClientConfig:
    config = ClientConfig.from_env()
    if not config.has_omdb and not config.has_tmdb:
        logger.warning("Neither OMDB_API_KEY nor TMDB_API_KEY is set; lookups will fail.")
    return config


@lru_cache
def get_lookup_client() -> MetadataLookupClient:
    """
    Returns a process-wide lookup client built from environment keys.
    """
    return MetadataLookupClient(get_client_config())


def get_cors_origins() -> list[str]:
    """
    Get CORS allowed origins from environment.
    Set CORS_ALLOW_ORIGINS as comma-separated list of origins.
    Example: CORS_ALLOW_ORIGINS=https://example.github.io
    """
    origins_str = os.getenv("CORS_ALLOW_ORIGINS", "")
    if not origins_str:
        return []
    return [origin.strip() for origin in origins_str.split(",") if origin.strip()]


# Type alias for dependency injection
LookupClient = Annotated[MetadataLookupClient, Depends(get_lookup_client)]
