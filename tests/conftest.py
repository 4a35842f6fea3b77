from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable
from unittest.mock import MagicMock

import pytest

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"


def make_response(payload: Any = None, *, status_code: int = 200, text: str | None = None) -> MagicMock:
    """
    Build a requests.Response stand-in; pass `text` without `payload` for a non-JSON body.
    """
    resp = MagicMock()
    resp.status_code = status_code
    if payload is None and text is not None:
        resp.text = text
        resp.json.side_effect = ValueError("Expecting value: line 1 column 1 (char 0)")
    else:
        resp.text = json.dumps(payload)
        resp.json.return_value = payload
    return resp


@pytest.fixture
def load_fixture() -> Callable[[str], dict[str, Any]]:
    def _load(relative_path: str) -> dict[str, Any]:
        return json.loads((FIXTURES_DIR / relative_path).read_text(encoding="utf-8"))

    return _load


@pytest.fixture
def response_factory() -> Callable[..., MagicMock]:
    return make_response


@pytest.fixture
def fake_session() -> MagicMock:
    """A requests.Session mock; tests queue responses via `get.side_effect`/`get.return_value`."""
    return MagicMock()
