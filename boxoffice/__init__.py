"""
Shared box office lookup library code.

This package is intended to hold code that is reused across:
- the FastAPI app in `api/`
- scripts in `scripts/`

App entrypoints (FastAPI routers, CLI scripts) should live outside this package and
import from `boxoffice` rather than the other way around.
"""
