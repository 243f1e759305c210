"""Abstract base class for submission listing sources."""

import logging
from abc import ABC, abstractmethod
from typing import Generator, List

import httpx

from ..config import AppConfig
from ..models import Submission

logger = logging.getLogger("subreddit_scraper")


class BaseSource(ABC):
    name: str = ""

    def __init__(self, config: AppConfig, client: httpx.Client):
        self.config = config
        self.client = client

    @abstractmethod
    def authenticate(self):
        """Obtain whatever session the listing calls need. Raises AuthError."""
        ...

    @abstractmethod
    def list_submissions(self, subreddit: str, sort: str, limit: int) -> List[Submission]:
        """Return up to `limit` submissions in listing order. Raises ListingError."""
        ...

    def discover(self) -> Generator[str, None, None]:
        """Yield candidate URLs for the configured subreddit."""
        sub = self.config.subreddit
        logger.info(f"[{self.name}] Listing r/{sub.name} ({sub.sort}, limit {sub.limit})...")
        submissions = self.list_submissions(sub.name, sub.sort, sub.limit)
        logger.info(f"[{self.name}] {len(submissions)} submissions listed")
        for s in submissions:
            logger.debug(f"[{self.name}] {s.id} {s.permalink} \"{s.title}\" -> {s.url or '<no url>'}")
            if s.url:
                yield s.url
