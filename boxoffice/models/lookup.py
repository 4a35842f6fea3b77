from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

NOT_AVAILABLE = "N/A"


class FailureKind(str, Enum):
    MISSING_CREDENTIAL = "missing_credential"
    INVALID_INPUT = "invalid_input"
    UPSTREAM_LOGICAL_ERROR = "upstream_logical_error"
    UPSTREAM_NOT_FOUND = "upstream_not_found"
    TRANSPORT_ERROR = "transport_error"


@dataclass(frozen=True)
class OmdbMovie:
    """
    Normalized OMDB title record.

    `box_office` is always populated; OMDB omits it for many titles, in which
    case it holds the literal "N/A".
    """

    title: str | None
    year: str | None
    box_office: str
    imdb_rating: str | None
    imdb_id: str | None
    plot: str | None
    poster: str | None

    ok = True

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "year": self.year,
            "boxOffice": self.box_office,
            "imdbRating": self.imdb_rating,
            "imdbId": self.imdb_id,
            "plot": self.plot,
            "poster": self.poster,
        }


@dataclass(frozen=True)
class TmdbMovie:
    """
    Normalized TMDB movie record.

    Money fields are display strings ("$1,234"); `poster_url` is None rather
    than a half-built URL when TMDB has no poster.
    """

    title: str | None
    year: str | None
    revenue: str
    budget: str
    tmdb_rating: float | None
    tmdb_id: int | None
    overview: str | None
    poster_url: str | None

    ok = True

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "year": self.year,
            "revenue": self.revenue,
            "budget": self.budget,
            "tmdbRating": self.tmdb_rating,
            "tmdbId": self.tmdb_id,
            "overview": self.overview,
            "posterPath": self.poster_url,
        }


@dataclass(frozen=True)
class LookupFailure:
    reason: str
    kind: FailureKind

    ok = False

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.reason}


LookupResult = Union[OmdbMovie, TmdbMovie, LookupFailure]


@dataclass(frozen=True)
class BatchEntry:
    query_title: str
    result: LookupResult

    def to_dict(self) -> dict[str, Any]:
        return {self.query_title: self.result.to_dict()}
