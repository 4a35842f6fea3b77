"""
OMDB integration client.
"""

from boxoffice.integrations.omdb.client import (
    OmdbClientError,
    build_title_params,
    fetch_title_payload,
    is_success_payload,
)

__all__ = [
    "OmdbClientError",
    "build_title_params",
    "fetch_title_payload",
    "is_success_payload",
]
