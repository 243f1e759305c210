"""CLI entry point."""

import argparse
import logging
import os
import sys

from .config import SORT_MODES, AppConfig, load_config
from .downloader import ImageFetcher, build_client
from .errors import AuthError, ConfigError, FileIOError, ListingError
from .filters import ExtensionFilter
from .logger import setup_logger
from .models import BatchResult, Orientation
from .pipeline import FetchOrchestrator
from .placement import PlacementRouter
from .sources import ALL_SOURCES

logger = logging.getLogger("subreddit_scraper")


def run_scraper(config: AppConfig, client, source_name: str = "reddit") -> BatchResult:
    """List, filter, fetch and sort. Auth/listing errors propagate."""
    source = ALL_SOURCES[source_name](config, client)
    source.authenticate()
    candidates = list(source.discover())

    ext_filter = ExtensionFilter(config.subreddit.allowed_extensions)
    eligible = ext_filter.filter(candidates)
    logger.info(f"{len(eligible)} of {len(candidates)} submissions have an allowed extension")

    out = config.output
    router = PlacementRouter(
        horizontal_dir=os.path.join(out.work_dir, out.horizontal_dir),
        vertical_dir=os.path.join(out.work_dir, out.vertical_dir),
    )
    router.ensure_directories()

    fetcher = ImageFetcher(client, router, work_dir=out.work_dir,
                           chunk_size=config.download.chunk_size)
    orchestrator = FetchOrchestrator(fetcher, config.subreddit.max_concurrency)
    return orchestrator.run(eligible)


def summarize(result: BatchResult) -> str:
    if not result.ok:
        return str(result.error)
    return (
        f"Done: {len(result.succeeded)} images sorted "
        f"({result.count(Orientation.HORIZONTAL)} horizontal, "
        f"{result.count(Orientation.VERTICAL)} vertical)"
    )


def apply_overrides(config: AppConfig, args: argparse.Namespace) -> AppConfig:
    if args.subreddit:
        config.subreddit.name = args.subreddit
    if args.sort:
        config.subreddit.sort = args.sort
    if args.limit is not None:
        config.subreddit.limit = args.limit
    if args.max_concurrency is not None:
        config.subreddit.max_concurrency = args.max_concurrency
    return config.validate()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Download subreddit images and sort them by orientation")
    parser.add_argument("--config", type=str, default="config.yaml",
                        help="Path to config file")
    parser.add_argument("--source", type=str, default="reddit",
                        choices=list(ALL_SOURCES.keys()),
                        help="Listing source")
    parser.add_argument("--subreddit", type=str, default=None,
                        help="Subreddit to list (overrides config)")
    parser.add_argument("--sort", type=str, default=None, choices=SORT_MODES,
                        help="Listing sort mode (overrides config)")
    parser.add_argument("--limit", type=int, default=None,
                        help="Number of submissions to list (overrides config)")
    parser.add_argument("--max-concurrency", type=int, default=None,
                        help="Maximum simultaneous downloads, 0 for unbounded")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Debug logging")
    args = parser.parse_args(argv)

    try:
        config = apply_overrides(load_config(args.config), args)
    except ConfigError as e:
        print(f"Configuration error: {e}")
        return 2

    setup_logger(config.log_dir, logging.DEBUG if args.verbose else logging.INFO)

    client = build_client(config.download)
    try:
        result = run_scraper(config, client, args.source)
    except (AuthError, ListingError, FileIOError) as e:
        logger.error(f"Fatal: {e}")
        print(e)
        return 2
    finally:
        client.close()

    print(summarize(result))
    return 0 if result.ok else 1


if __name__ == "__main__":
    sys.exit(main())
