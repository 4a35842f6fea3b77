"""
Lookup result types shared by the client, the API and scripts.
"""

from boxoffice.models.lookup import (
    NOT_AVAILABLE,
    BatchEntry,
    FailureKind,
    LookupFailure,
    LookupResult,
    OmdbMovie,
    TmdbMovie,
)

__all__ = [
    "NOT_AVAILABLE",
    "BatchEntry",
    "FailureKind",
    "LookupFailure",
    "LookupResult",
    "OmdbMovie",
    "TmdbMovie",
]
