"""Tests for logging setup."""
import logging

from subreddit_scraper.logger import LOGGER_NAME, setup_logger


class TestSetupLogger:
    """Tests for setup_logger."""

    def test_console_and_file(self, tmp_path):
        logger = setup_logger(str(tmp_path / "logs"))

        assert logger.name == LOGGER_NAME
        assert len(logger.handlers) == 2
        assert (tmp_path / "logs" / "scraper.log").exists()

    def test_second_call_only_changes_level(self, tmp_path):
        setup_logger(str(tmp_path))
        logger = setup_logger(str(tmp_path), logging.DEBUG)

        assert len(logger.handlers) == 2
        assert logger.level == logging.DEBUG
        assert all(h.level == logging.DEBUG for h in logger.handlers)

    def test_messages_reach_file(self, tmp_path):
        logger = setup_logger(str(tmp_path))

        logging.getLogger(LOGGER_NAME).info("sorted wide.jpg")
        for h in logger.handlers:
            h.flush()

        assert "sorted wide.jpg" in (tmp_path / "scraper.log").read_text()
