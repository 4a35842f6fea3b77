from __future__ import annotations

from dataclasses import dataclass

from boxoffice.utils.env import load_env, read_env_value

OMDB_API_KEY_ENV = "OMDB_API_KEY"
TMDB_API_KEY_ENV = "TMDB_API_KEY"


def _clean_key(value: str | None) -> str | None:
    if value is None:
        return None
    stripped = str(value).strip()
    return stripped or None


@dataclass(frozen=True)
class ClientConfig:
    """
    API keys for the metadata providers.

    Either key may be missing; a provider is only rejected when one of its
    lookups is attempted without a key.
    """

    omdb_api_key: str | None = None
    tmdb_api_key: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "omdb_api_key", _clean_key(self.omdb_api_key))
        object.__setattr__(self, "tmdb_api_key", _clean_key(self.tmdb_api_key))

    @property
    def has_omdb(self) -> bool:
        return self.omdb_api_key is not None

    @property
    def has_tmdb(self) -> bool:
        return self.tmdb_api_key is not None

    @classmethod
    def from_env(cls) -> ClientConfig:
        load_env()
        return cls(
            omdb_api_key=read_env_value(OMDB_API_KEY_ENV),
            tmdb_api_key=read_env_value(TMDB_API_KEY_ENV),
        )

    @classmethod
    def resolve(cls, omdb_api_key: str | None = None, tmdb_api_key: str | None = None) -> ClientConfig:
        """
        Prefer explicitly passed keys, falling back to the environment (and `.env`).
        """

        env = cls.from_env()
        return cls(
            omdb_api_key=_clean_key(omdb_api_key) or env.omdb_api_key,
            tmdb_api_key=_clean_key(tmdb_api_key) or env.tmdb_api_key,
        )
