"""Query the Foursquare venues API from the command line.

Reads credentials from FS_CLIENT_ID / FS_CLIENT_SECRET (or FS_OAUTH_TOKEN).

Usage:
    python examples/venues.py search --near "Chicago, IL" --query coffee
    python examples/venues.py suggest --ll 37.5665,126.9780 --query coffee
    python examples/venues.py recommendations --ll 40.7686834,-73.9539324 --feature 1 --feature 13
    python examples/venues.py details 4b63f4c0f964a5209b982ae3
    python examples/venues.py hours 5783fac6cd10361b6f2ca3fc --locale fr
    python examples/venues.py tips 4b63f4c0f964a5209b982ae3 --sort popular
"""

from __future__ import annotations

import argparse
import logging
import sys

from foursquare import (
    Feature,
    FoursquareClient,
    FoursquareError,
    HoursOptions,
    RecommendationsOptions,
    SearchOptions,
    SuggestOptions,
    TipsOptions,
    VenueDetailsOptions,
)
from foursquare.config import settings
from foursquare.logging_config import setup_logging

logger = logging.getLogger("foursquare.examples")


def _run(client: FoursquareClient, args: argparse.Namespace):
    if args.command == "search":
        return client.search(SearchOptions(ll=args.ll, near=args.near, query=args.query, limit=args.limit))
    if args.command == "suggest":
        return client.suggest(SuggestOptions(ll=args.ll, near=args.near, query=args.query, limit=args.limit))
    if args.command == "recommendations":
        return client.recommendations(
            RecommendationsOptions(ll=args.ll, near=args.near, query=args.query, features=args.feature or None)
        )
    if args.command == "details":
        return client.details(args.venue_id, VenueDetailsOptions(locale=args.locale))
    if args.command == "hours":
        return client.hours(args.venue_id, HoursOptions(locale=args.locale))
    return client.tips(args.venue_id, TipsOptions(sort=args.sort, limit=args.limit))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Foursquare venues API examples")
    sub = parser.add_subparsers(dest="command", required=True)

    for name in ("search", "suggest", "recommendations"):
        p = sub.add_parser(name)
        p.add_argument("--ll", help="latitude,longitude")
        p.add_argument("--near", help="place name, e.g. 'Chicago, IL'")
        p.add_argument("--query")
        if name == "recommendations":
            p.add_argument(
                "--feature", action="append", default=[], type=Feature, metavar="CODE",
                help="feature code (repeatable)",
            )
        else:
            p.add_argument("--limit", type=int)

    for name in ("details", "hours", "tips"):
        p = sub.add_parser(name)
        p.add_argument("venue_id")
        if name == "tips":
            p.add_argument("--sort", choices=["friends", "recent", "popular"])
            p.add_argument("--limit", type=int)
        else:
            p.add_argument("--locale")

    args = parser.parse_args(argv)
    setup_logging(settings.log_level, settings.log_format)

    if settings.credentials() is None:
        logger.error("example missing FS_CLIENT_ID and/or FS_CLIENT_SECRET")
        return 2

    with FoursquareClient.from_settings(settings) as client:
        try:
            envelope = _run(client, args)
        except FoursquareError as exc:
            logger.error("err %s", exc)
            return 1
    print(envelope.response.model_dump_json(by_alias=True, exclude_none=True, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
