"""CLI runner for listing Game Sanpi articles and their illustrations."""

from __future__ import annotations

import argparse
import json
from dataclasses import asdict
from pathlib import Path
from typing import Optional

from sanpi.config import configure_logging, get_settings
from sanpi.services.news.client import SiteClient
from sanpi.services.news.errors import FeedError
from sanpi.services.news.lister import list_articles
from sanpi.services.news.prober import discover_illustrations


def positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return number


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Discover Game Sanpi article illustrations.")
    parser.add_argument(
        "--articles",
        action="store_true",
        help="List articles instead of probing for illustrations.",
    )
    parser.add_argument(
        "--limit",
        type=positive_int,
        default=settings.max_illustrations,
        help="Stop after this many illustrations.",
    )
    parser.add_argument(
        "--max-articles",
        type=positive_int,
        default=settings.max_articles_to_check,
        help="Probe at most this many of the newest articles.",
    )
    parser.add_argument(
        "--out",
        default=None,
        help="Write the result as JSON to this path.",
    )
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)
    settings = get_settings().model_copy(
        update={"max_illustrations": args.limit, "max_articles_to_check": args.max_articles}
    )
    configure_logging(settings.log_level)
    client = SiteClient(user_agent=settings.user_agent, timeout_s=settings.request_timeout_seconds)

    print(f"[info] Fetching {settings.listing_url}")
    try:
        if args.articles:
            items = [asdict(item) for item in list_articles(client, settings)]
            for item in items:
                print(f"{item['sort_key'] or '-':>10}  {item['title']}  {item['url']}")
        else:
            items = [asdict(item) for item in discover_illustrations(client, settings)]
            for item in items:
                print(f"{item['published_date']}  #{item['illust_number']}  {item['image_url']}")
    except FeedError as exc:
        print(f"[error] {exc}")
        return 1

    print(f"[summary] total={len(items)}")
    if args.out:
        out_path = Path(args.out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(json.dumps(items, ensure_ascii=False, indent=2), encoding="utf-8")
    return 0


if __name__ == "__main__":  # pragma: no cover - manual execution
    raise SystemExit(main())
