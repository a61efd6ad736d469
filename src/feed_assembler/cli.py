"""Command line entry point: fetch the feed once and print it."""

import argparse
import asyncio
import json
import logging
import sys
from typing import Sequence

import httpx

from .config import Settings, load_settings
from .errors import FetchError
from .lib.fetcher import Fetcher
from .lib.http_client import create_http_client
from .lib.orchestrator import load_feed
from .models import PostWithCommentsAndAuthor
from .render import format_feed

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="feed-assembler",
        description="Fetch posts and print each with its author and comments.",
    )
    p.add_argument("--base-url", default=None, help="Feed service base address.")
    p.add_argument("--timeout", type=float, default=None, help="Request timeout in seconds.")
    p.add_argument("--log-level", default=None, help="Log level (DEBUG shows HTTP bodies).")
    p.add_argument("--json", action="store_true", help="Print records as JSON.")
    return p


async def fetch_feed(
    settings: Settings,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> list[PostWithCommentsAndAuthor]:
    async with create_http_client(settings, transport=transport) as client:
        return await load_feed(Fetcher(client))


def _dump_json(records: list[PostWithCommentsAndAuthor]) -> str:
    return json.dumps(
        [r.model_dump(mode="json", by_alias=True) for r in records],
        ensure_ascii=False,
        indent=2,
    )


def main(
    argv: Sequence[str] | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> int:
    args = build_parser().parse_args(argv)
    settings = load_settings(
        base_url=args.base_url,
        timeout=args.timeout,
        log_level=args.log_level,
    )
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        records = asyncio.run(fetch_feed(settings, transport=transport))
    except FetchError as exc:
        logger.error("Could not assemble feed: %s", exc)
        return 1

    print(_dump_json(records) if args.json else format_feed(records))
    return 0


if __name__ == "__main__":
    sys.exit(main())
