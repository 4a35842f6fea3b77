"""
Movie metadata lookups against OMDB and TMDB, normalized into `boxoffice.models`.

Every public method returns a result value. Missing keys, bad input, upstream
errors and transport failures all come back as `LookupFailure`; nothing is
raised across this boundary.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Iterable

import requests

from boxoffice.config import ClientConfig
from boxoffice.integrations.http import DEFAULT_TIMEOUT_SECONDS, redact_secrets
from boxoffice.integrations.omdb.client import OmdbClientError, fetch_title_payload, is_success_payload
from boxoffice.integrations.tmdb.client import (
    TmdbClientError,
    build_poster_url,
    fetch_movie_details,
    search_movies,
    tmdb_error_message,
)
from boxoffice.models.lookup import (
    NOT_AVAILABLE,
    BatchEntry,
    FailureKind,
    LookupFailure,
    LookupResult,
    OmdbMovie,
    TmdbMovie,
)

logger = logging.getLogger(__name__)

OMDB_KEY_REQUIRED = "OMDB API key required"
TMDB_KEY_REQUIRED = "TMDB API key required"
NO_API_KEY = "No API key provided"
OMDB_INPUT_REQUIRED = "Provide either title or imdbId"
TMDB_INPUT_REQUIRED = "Provide either movieId or title"
MOVIE_NOT_FOUND = "Movie not found"


def _transport_failure(prefix: str, exc: Exception) -> LookupFailure:
    return LookupFailure(f"{prefix}: {redact_secrets(str(exc))}", FailureKind.TRANSPORT_ERROR)


def format_usd(value: Any) -> str:
    """
    Format a TMDb money figure as "$1,234,567"; absent or unusable values are "$0".
    """

    if isinstance(value, bool) or value is None:
        return "$0"
    if isinstance(value, str):
        try:
            value = float(value.replace(",", "").strip())
        except ValueError:
            return "$0"
    if not isinstance(value, (int, float)):
        return "$0"
    if isinstance(value, float):
        if not math.isfinite(value):
            return "$0"
        if value.is_integer():
            value = int(value)
        else:
            value = round(value, 3)
    return f"${value:,}"


def _year_from_release_date(release_date: Any) -> str | None:
    if isinstance(release_date, str) and release_date.strip():
        return release_date.strip()[:4]
    return None


def _omdb_movie_from_payload(payload: dict[str, Any]) -> OmdbMovie:
    return OmdbMovie(
        title=payload.get("Title"),
        year=payload.get("Year"),
        box_office=payload.get("BoxOffice") or NOT_AVAILABLE,
        imdb_rating=payload.get("imdbRating"),
        imdb_id=payload.get("imdbID"),
        plot=payload.get("Plot"),
        poster=payload.get("Poster"),
    )


def _tmdb_movie_from_payload(payload: dict[str, Any]) -> TmdbMovie:
    return TmdbMovie(
        title=payload.get("title"),
        year=_year_from_release_date(payload.get("release_date")),
        revenue=format_usd(payload.get("revenue")),
        budget=format_usd(payload.get("budget")),
        tmdb_rating=payload.get("vote_average"),
        tmdb_id=payload.get("id"),
        overview=payload.get("overview"),
        poster_url=build_poster_url(payload.get("poster_path")),
    )


class MetadataLookupClient:
    """
    Resolve movie titles (or provider ids) to normalized metadata.

    Lookups are strictly sequential: one request in flight at a time, batches
    processed in input order.
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        session: requests.Session | None = None,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self.config = config or ClientConfig()
        self.timeout_seconds = timeout_seconds
        self._owns_session = session is None
        self._session = session or requests.Session()

    def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> MetadataLookupClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def lookup_omdb(self, title: str | None = None, imdb_id: str | None = None) -> LookupResult:
        api_key = self.config.omdb_api_key
        if not api_key:
            return LookupFailure(OMDB_KEY_REQUIRED, FailureKind.MISSING_CREDENTIAL)
        if not imdb_id and not title:
            return LookupFailure(OMDB_INPUT_REQUIRED, FailureKind.INVALID_INPUT)

        logger.debug("OMDB lookup by %s: %s", "imdb_id" if imdb_id else "title", imdb_id or title)
        try:
            payload = fetch_title_payload(
                api_key=api_key,
                title=title,
                imdb_id=imdb_id,
                session=self._session,
                timeout_seconds=self.timeout_seconds,
            )
        except (OmdbClientError, requests.RequestException) as exc:
            failure = _transport_failure("Request failed", exc)
            logger.warning("OMDB request failed for %r: %s", imdb_id or title, failure.reason)
            return failure

        if not is_success_payload(payload):
            error = payload.get("Error")
            reason = str(error) if error else "OMDB returned an unsuccessful response."
            return LookupFailure(reason, FailureKind.UPSTREAM_LOGICAL_ERROR)
        return _omdb_movie_from_payload(payload)

    def lookup_tmdb(self, movie_id: int | str | None = None, title: str | None = None) -> LookupResult:
        api_key = self.config.tmdb_api_key
        if not api_key:
            return LookupFailure(TMDB_KEY_REQUIRED, FailureKind.MISSING_CREDENTIAL)

        if title and not movie_id:
            logger.debug("TMDB search: %s", title)
            try:
                results = search_movies(
                    title,
                    api_key=api_key,
                    session=self._session,
                    timeout_seconds=self.timeout_seconds,
                )
            except (TmdbClientError, requests.RequestException) as exc:
                failure = _transport_failure("Search failed", exc)
                logger.warning("TMDB search failed for %r: %s", title, failure.reason)
                return failure

            if not results:
                return LookupFailure(MOVIE_NOT_FOUND, FailureKind.UPSTREAM_NOT_FOUND)
            # First result wins; TMDb's own relevance order is the only ranking.
            movie_id = results[0].get("id")

        if not movie_id:
            return LookupFailure(TMDB_INPUT_REQUIRED, FailureKind.INVALID_INPUT)

        logger.debug("TMDB details: %s", movie_id)
        try:
            payload = fetch_movie_details(
                movie_id,
                api_key=api_key,
                session=self._session,
                timeout_seconds=self.timeout_seconds,
            )
        except (TmdbClientError, requests.RequestException) as exc:
            failure = _transport_failure("Request failed", exc)
            logger.warning("TMDB details request failed for id=%s: %s", movie_id, failure.reason)
            return failure

        upstream_error = tmdb_error_message(payload)
        if upstream_error is not None:
            return LookupFailure(upstream_error, FailureKind.UPSTREAM_LOGICAL_ERROR)
        return _tmdb_movie_from_payload(payload)

    def lookup_title(self, title: str) -> LookupResult:
        """
        Look up one title with whichever provider is configured, OMDB first.
        """

        if self.config.has_omdb:
            return self.lookup_omdb(title=title)
        if self.config.has_tmdb:
            return self.lookup_tmdb(title=title)
        return LookupFailure(NO_API_KEY, FailureKind.MISSING_CREDENTIAL)

    def lookup_batch(self, titles: Iterable[str]) -> list[BatchEntry]:
        entries: list[BatchEntry] = []
        for title in titles:
            entries.append(BatchEntry(query_title=title, result=self.lookup_title(title)))
        return entries
