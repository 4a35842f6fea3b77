from __future__ import annotations

import json

import pytest

import scripts.fetch_box_office as mod
from boxoffice.models import BatchEntry, FailureKind, LookupFailure, OmdbMovie


class _StubClient:
    def __init__(self, config, **kwargs):
        self.config = config
        self.closed = False
        _StubClient.last = self

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.closed = True

    def lookup_batch(self, titles):
        entries = []
        for title in titles:
            if title == "Missing":
                result = LookupFailure("Movie not found!", FailureKind.UPSTREAM_LOGICAL_ERROR)
            else:
                result = OmdbMovie(
                    title=title,
                    year="2010",
                    box_office="N/A",
                    imdb_rating=None,
                    imdb_id=None,
                    plot=None,
                    poster=None,
                )
            entries.append(BatchEntry(query_title=title, result=result))
        return entries


def test_main_prints_results_in_input_order(monkeypatch: pytest.MonkeyPatch, capsys) -> None:
    captured_config = {}

    def _fake_resolve(omdb_api_key=None, tmdb_api_key=None):
        captured_config["omdb"] = omdb_api_key
        captured_config["tmdb"] = tmdb_api_key
        return mod.ClientConfig(omdb_api_key=omdb_api_key, tmdb_api_key=tmdb_api_key)

    monkeypatch.setattr(mod.ClientConfig, "resolve", staticmethod(_fake_resolve))
    monkeypatch.setattr(mod, "MetadataLookupClient", _StubClient)

    exit_code = mod.main(["Inception", "Missing", "--omdb-key", "abc"])

    assert exit_code == 0
    assert captured_config == {"omdb": "abc", "tmdb": None}
    output = json.loads(capsys.readouterr().out)
    assert [list(item.keys())[0] for item in output] == ["Inception", "Missing"]
    assert output[0]["Inception"]["boxOffice"] == "N/A"
    assert output[1]["Missing"] == {"error": "Movie not found!"}
    assert _StubClient.last.closed is True


def test_parse_args_requires_titles() -> None:
    with pytest.raises(SystemExit):
        mod._parse_args([])
