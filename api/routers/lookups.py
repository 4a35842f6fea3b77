"""
Movie lookup endpoints.

Lookup failures (missing key, unknown title, upstream outage) are part of the
normal response body as `{"error": "..."}`; they never become HTTP errors.
"""

from __future__ import annotations

from typing import Any, Union

from fastapi import APIRouter, Query
from pydantic import BaseModel

from api.deps import LookupClient

router = APIRouter(prefix="/lookups", tags=["lookups"])


# --- Pydantic models ---

class OmdbMovieOut(BaseModel):
    title: str | None
    year: str | None
    boxOffice: str
    imdbRating: str | None
    imdbId: str | None
    plot: str | None
    poster: str | None


class TmdbMovieOut(BaseModel):
    title: str | None
    year: str | None
    revenue: str
    budget: str
    tmdbRating: float | None
    tmdbId: int | None
    overview: str | None
    posterPath: str | None


class LookupErrorOut(BaseModel):
    error: str


LookupOut = Union[OmdbMovieOut, TmdbMovieOut, LookupErrorOut]


class BatchRequest(BaseModel):
    titles: list[str]


class BatchItemOut(BaseModel):
    query_title: str
    result: LookupOut


class BatchResponse(BaseModel):
    results: list[BatchItemOut]


# --- Endpoints ---

@router.get("/omdb", response_model=Union[OmdbMovieOut, LookupErrorOut])
def lookup_omdb(
    client: LookupClient,
    title: str | None = Query(default=None),
    imdb_id: str | None = Query(default=None),
) -> dict[str, Any]:
    """Look up a movie on OMDB; `imdb_id` wins over `title`."""
    return client.lookup_omdb(title=title, imdb_id=imdb_id).to_dict()


@router.get("/tmdb", response_model=Union[TmdbMovieOut, LookupErrorOut])
def lookup_tmdb(
    client: LookupClient,
    movie_id: int | None = Query(default=None),
    title: str | None = Query(default=None),
) -> dict[str, Any]:
    """Look up a movie on TMDB by id, or by title via search (first result)."""
    return client.lookup_tmdb(movie_id=movie_id, title=title).to_dict()


@router.post("/batch", response_model=BatchResponse)
def lookup_batch(client: LookupClient, body: BatchRequest) -> dict[str, Any]:
    """Look up each title in order against the configured provider."""
    entries = client.lookup_batch(body.titles)
    return {
        "results": [
            {"query_title": entry.query_title, "result": entry.result.to_dict()}
            for entry in entries
        ]
    }
