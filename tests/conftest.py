"""Shared pytest fixtures."""
import logging

import pytest

from subreddit_scraper.placement import PlacementRouter

from .fixtures import FakeImageHost


@pytest.fixture
def host() -> FakeImageHost:
    return FakeImageHost()


@pytest.fixture
def client(host: FakeImageHost):
    c = host.client()
    yield c
    c.close()


@pytest.fixture
def work_dir(tmp_path):
    d = tmp_path / "work"
    d.mkdir()
    return d


@pytest.fixture
def router(tmp_path) -> PlacementRouter:
    r = PlacementRouter(
        horizontal_dir=str(tmp_path / "hori"),
        vertical_dir=str(tmp_path / "vert"),
    )
    r.ensure_directories()
    return r


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    logger = logging.getLogger("subreddit_scraper")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
