from __future__ import annotations

import dataclasses

import pytest

import boxoffice.config as config_mod
from boxoffice.config import ClientConfig


@pytest.fixture(autouse=True)
def _no_dotenv(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config_mod, "load_env", lambda *args, **kwargs: None)
    monkeypatch.delenv("OMDB_API_KEY", raising=False)
    monkeypatch.delenv("TMDB_API_KEY", raising=False)


def test_blank_keys_are_treated_as_missing() -> None:
    config = ClientConfig(omdb_api_key="  ", tmdb_api_key=" abc ")
    assert config.omdb_api_key is None
    assert config.tmdb_api_key == "abc"
    assert not config.has_omdb
    assert config.has_tmdb


def test_config_is_immutable() -> None:
    config = ClientConfig(omdb_api_key="k")
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.omdb_api_key = "other"  # type: ignore[misc]


def test_from_env_reads_both_keys(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OMDB_API_KEY", "omdb-key")
    monkeypatch.setenv("TMDB_API_KEY", "")

    config = ClientConfig.from_env()

    assert config == ClientConfig(omdb_api_key="omdb-key", tmdb_api_key=None)


def test_resolve_prefers_explicit_keys(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OMDB_API_KEY", "env-omdb")
    monkeypatch.setenv("TMDB_API_KEY", "env-tmdb")

    config = ClientConfig.resolve(omdb_api_key="cli-omdb")

    assert config.omdb_api_key == "cli-omdb"
    assert config.tmdb_api_key == "env-tmdb"
