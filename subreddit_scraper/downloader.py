"""HTTP image fetcher: download, measure, route."""

import logging
import os
from typing import Optional, Tuple
from urllib.parse import urlparse

import httpx

from . import imaging
from .config import DownloadConfig
from .errors import FileIOError, NamingError, NetworkError, ScraperError
from .models import FetchOutcome, Orientation
from .placement import PlacementRouter

logger = logging.getLogger("subreddit_scraper")


def build_client(config: DownloadConfig) -> httpx.Client:
    """Create the HTTP client shared by the source and every fetch worker."""
    return httpx.Client(
        timeout=httpx.Timeout(config.timeout),
        follow_redirects=True,
        headers={"User-Agent": config.user_agent},
    )


def filename_from_url(url: str) -> str:
    """Final path segment of `url`, e.g. 'https://i.redd.it/abc.jpg' -> 'abc.jpg'."""
    name = os.path.basename(urlparse(url).path) if url else ""
    if name in ("", ".", ".."):
        raise NamingError("URL has no final path segment", url or "<empty>")
    return name


class ImageFetcher:
    def __init__(self, client: httpx.Client, router: PlacementRouter,
                 work_dir: str = ".", chunk_size: int = 65536):
        self.client = client
        self.router = router
        self.work_dir = work_dir
        self.chunk_size = chunk_size

    def fetch(self, url: str) -> FetchOutcome:
        """Run one unit of work. Pipeline failures are returned, not raised.

        A failed unit may leave its partial file in work_dir; it is kept for
        diagnostics and never routed.
        """
        try:
            local_path, orientation, ratio = self._fetch(url)
        except ScraperError as e:
            logger.error(f"Failed: {url}: {e}")
            return FetchOutcome(url=url, error=e)
        return FetchOutcome(url=url, local_path=local_path, orientation=orientation, aspect_ratio=ratio)

    def _fetch(self, url: str) -> Tuple[str, Orientation, float]:
        filename = filename_from_url(url)
        local_path = os.path.join(self.work_dir, filename)

        try:
            f = open(local_path, "wb")
        except OSError as e:
            raise FileIOError(f"Could not create file: {e}", local_path) from e

        with f:
            content_type, length = self._head(url)
            logger.debug(f"HEAD {url}: length={length}, type={content_type}")
            self._stream_into(url, f)

        ratio = imaging.aspect_ratio(local_path, content_type)
        orientation = self.router.orientation_for(ratio)
        new_path = self.router.place(local_path, orientation)

        logger.info(
            f"Getting image {url}, length: {length}, type: {content_type}, "
            f"aspect ratio: {ratio:f} -> {new_path}"
        )
        return new_path, orientation, ratio

    def _head(self, url: str) -> Tuple[Optional[str], Optional[str]]:
        """Return (content-type, content-length) as declared by the server."""
        try:
            resp = self.client.head(url)
            resp.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise NetworkError(f"HEAD request failed: {e}", url) from e
        return resp.headers.get("content-type"), resp.headers.get("content-length")

    def _stream_into(self, url: str, f) -> int:
        size = 0
        try:
            with self.client.stream("GET", url) as resp:
                resp.raise_for_status()
                for chunk in resp.iter_bytes(chunk_size=self.chunk_size):
                    f.write(chunk)
                    size += len(chunk)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise NetworkError(f"Download failed: {e}", url) from e
        except OSError as e:
            raise FileIOError(f"Could not write file: {e}", f.name) from e
        return size
