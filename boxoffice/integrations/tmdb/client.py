from __future__ import annotations

from typing import Any

import requests

from boxoffice.integrations.http import DEFAULT_TIMEOUT_SECONDS, ProviderClientError, request_json

TMDB_API_BASE_URL = "https://api.themoviedb.org/3"
TMDB_POSTER_BASE_URL = "https://image.tmdb.org/t/p/w500"


class TmdbClientError(ProviderClientError):
    pass


def _require_api_key(api_key: str | None) -> str:
    resolved = (api_key or "").strip()
    if not resolved:
        raise TmdbClientError("TMDB API key required")
    return resolved


def search_movies(
    query: str,
    *,
    api_key: str | None,
    session: requests.Session | None = None,
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
) -> list[dict[str, Any]]:
    """
    Search TMDb movies by free-text title via `/3/search/movie`.

    Returns the `results` list in TMDb's own order (empty when the payload has
    none, including TMDb error objects).
    """

    api_key = _require_api_key(api_key)
    session = session or requests.Session()
    url = f"{TMDB_API_BASE_URL}/search/movie"
    payload = request_json(
        session,
        url,
        provider="TMDb",
        error_cls=TmdbClientError,
        params={"api_key": api_key, "query": query},
        timeout_seconds=timeout_seconds,
    )
    results = payload.get("results")
    if not isinstance(results, list):
        return []
    return [r for r in results if isinstance(r, dict)]


def fetch_movie_details(
    movie_id: int | str,
    *,
    api_key: str | None,
    session: requests.Session | None = None,
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
) -> dict[str, Any]:
    """
    Fetch a movie details payload from TMDb.

    Returns the full JSON object as returned by `/3/movie/{id}`; TMDb error
    objects (`success: false`) are returned as-is for the caller to inspect.
    """

    api_key = _require_api_key(api_key)
    session = session or requests.Session()
    url = f"{TMDB_API_BASE_URL}/movie/{movie_id}"
    return request_json(
        session,
        url,
        provider="TMDb",
        error_cls=TmdbClientError,
        params={"api_key": api_key},
        timeout_seconds=timeout_seconds,
    )


def tmdb_error_message(payload: dict[str, Any]) -> str | None:
    """
    Return TMDb's `status_message` when `payload` is an error object, else None.
    """

    message = payload.get("status_message")
    if payload.get("success") is False:
        return str(message or "TMDb request was not successful.")
    if "id" not in payload and isinstance(message, str) and message.strip():
        return message.strip()
    return None


def build_poster_url(poster_path: Any) -> str | None:
    if not isinstance(poster_path, str) or not poster_path.strip():
        return None
    path = poster_path.strip()
    if not path.startswith("/"):
        path = f"/{path}"
    return f"{TMDB_POSTER_BASE_URL}{path}"
