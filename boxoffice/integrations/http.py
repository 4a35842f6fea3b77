from __future__ import annotations

import re
from typing import Any, Mapping

import requests

DEFAULT_TIMEOUT_SECONDS = 20.0
_SECRET_QUERY_RE = re.compile(r"(?i)\b(apikey|api_key)=[^&\s'\")]+")


class ProviderClientError(RuntimeError):
    def __init__(self, message: str, *, status_code: int | None = None, body_snippet: str | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body_snippet = body_snippet


def redact_secrets(message: str) -> str:
    """
    Mask the values of `apikey=` and `api_key=` query pairs left in request URLs.
    """

    return _SECRET_QUERY_RE.sub(r"\1=***", message)


def request_json(
    session: requests.Session,
    url: str,
    *,
    provider: str,
    error_cls: type[ProviderClientError] = ProviderClientError,
    params: Mapping[str, Any] | None = None,
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
) -> dict[str, Any]:
    """
    Issue a single GET and decode a JSON object body.

    The HTTP status is not checked. Both providers report domain errors (bad key,
    unknown id) as JSON objects, which callers inspect.
    Only transport failures and undecodable bodies raise `error_cls`.
    """

    headers = {
        "accept": "application/json",
        "user-agent": "Mozilla/5.0",
    }
    try:
        resp = session.get(url, params=params, headers=headers, timeout=timeout_seconds)
    except requests.RequestException as exc:
        message = redact_secrets(str(exc)) or f"{provider} request failed."
        raise error_cls(message) from exc

    try:
        payload = resp.json()
    except ValueError as exc:
        raise error_cls(
            f"{provider} returned non-JSON response.",
            status_code=resp.status_code,
            body_snippet=(resp.text or "")[:400],
        ) from exc

    if not isinstance(payload, dict):
        raise error_cls(
            f"{provider} returned unexpected JSON shape (not an object).",
            status_code=resp.status_code,
        )
    return payload
