"""Concurrent fan-out of image fetches and aggregation of their outcomes."""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Iterable, Optional

from .downloader import ImageFetcher
from .models import BatchResult, FetchOutcome

logger = logging.getLogger("subreddit_scraper")


class FetchOrchestrator:
    """Runs one fetch per eligible URL on a thread pool.

    The pool is sized by `max_concurrency`; 0 or None gives every URL its own
    worker. Every submitted unit is waited for, even after one has failed, and
    the aggregate error is the first failure in completion order. When several
    units fail, which one that is can differ between runs.
    """

    def __init__(self, fetcher: ImageFetcher, max_concurrency: Optional[int] = 0):
        self.fetcher = fetcher
        self.max_concurrency = max_concurrency or 0

    def _pool_size(self, n: int) -> int:
        if self.max_concurrency > 0:
            return min(self.max_concurrency, n)
        return n

    def run(self, urls: Iterable[str]) -> BatchResult:
        unique = list(dict.fromkeys(urls))
        result = BatchResult()
        if not unique:
            logger.info("No eligible URLs to fetch")
            return result

        workers = self._pool_size(len(unique))
        logger.info(f"Fetching {len(unique)} images with {workers} workers")

        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="fetch") as pool:
            futures = {pool.submit(self.fetcher.fetch, url): url for url in unique}
            for future in as_completed(futures):
                url = futures[future]
                try:
                    outcome = future.result()
                except Exception as e:
                    logger.exception(f"Unexpected error fetching {url}")
                    outcome = FetchOutcome(url=url, error=e)

                result.outcomes.append(outcome)
                if not outcome.ok and result.error is None:
                    result.error = outcome.error

        logger.info(f"Batch done: {len(result.succeeded)} ok, {len(result.failed)} failed")
        return result
