from __future__ import annotations

from typing import Any

import requests

from boxoffice.integrations.http import DEFAULT_TIMEOUT_SECONDS, ProviderClientError, request_json

OMDB_API_BASE_URL = "https://www.omdbapi.com/"


class OmdbClientError(ProviderClientError):
    pass


def build_title_params(api_key: str, *, title: str | None = None, imdb_id: str | None = None) -> dict[str, str]:
    """
    Build OMDB query params, preferring the exact `i` lookup over fuzzy `t`.
    """

    params = {"apikey": api_key}
    if imdb_id:
        params["i"] = imdb_id
    elif title:
        params["t"] = title
    else:
        raise ValueError("Provide either title or imdbId")
    return params


def fetch_title_payload(
    *,
    api_key: str,
    title: str | None = None,
    imdb_id: str | None = None,
    session: requests.Session | None = None,
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
) -> dict[str, Any]:
    """
    Fetch the raw OMDB payload for one title.

    OMDB answers logical failures (unknown title, bad key) with
    `{"Response": "False", "Error": ...}`, sometimes on HTTP 200; the payload is
    returned unchanged and `Response` must be checked by the caller.
    """

    params = build_title_params(api_key, title=title, imdb_id=imdb_id)
    session = session or requests.Session()
    return request_json(
        session,
        OMDB_API_BASE_URL,
        provider="OMDB",
        error_cls=OmdbClientError,
        params=params,
        timeout_seconds=timeout_seconds,
    )


def is_success_payload(payload: dict[str, Any]) -> bool:
    return payload.get("Response") == "True"
