from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv


def load_env(*, override: bool = False) -> Path | None:
    repo_root = Path(__file__).resolve().parents[2]
    candidates = [
        repo_root / ".env",
        Path.cwd() / ".env",
    ]
    for path in candidates:
        if path.is_file():
            load_dotenv(dotenv_path=path, override=override)
            return path
    return None


def read_env_value(name: str) -> str | None:
    """Return a stripped env var, treating blank values as unset."""

    value = (os.getenv(name) or "").strip()
    return value or None
