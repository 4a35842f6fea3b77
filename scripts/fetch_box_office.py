#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
import logging
import sys

from boxoffice.config import ClientConfig
from boxoffice.lookup import MetadataLookupClient


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="fetch_box_office",
        description="Look up box office data for movie titles via OMDB (preferred) or TMDB.",
    )
    parser.add_argument("titles", nargs="+", help="Movie titles, looked up in order.")
    parser.add_argument("--omdb-key", default=None, help="OMDB API key (defaults to OMDB_API_KEY).")
    parser.add_argument("--tmdb-key", default=None, help="TMDB API key (defaults to TMDB_API_KEY).")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging.")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv if argv is not None else sys.argv[1:])
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = ClientConfig.resolve(omdb_api_key=args.omdb_key, tmdb_api_key=args.tmdb_key)
    with MetadataLookupClient(config) as client:
        entries = client.lookup_batch(args.titles)

    print(json.dumps([entry.to_dict() for entry in entries], indent=2))
    if args.verbose:
        failed = sum(1 for entry in entries if not entry.result.ok)
        print(f"fetch_box_office: titles={len(entries)} failed={failed}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
