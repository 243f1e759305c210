"""Files downloaded images into horizontal/vertical directories."""

import logging
import os

from .errors import FileIOError
from .models import Orientation

logger = logging.getLogger("subreddit_scraper")


class PlacementRouter:
    def __init__(self, horizontal_dir: str = "hori", vertical_dir: str = "vert"):
        self.horizontal_dir = horizontal_dir
        self.vertical_dir = vertical_dir

    def ensure_directories(self):
        """Create both destinations. Safe to call when they already exist."""
        for d in (self.horizontal_dir, self.vertical_dir):
            try:
                os.makedirs(d, exist_ok=True)
            except OSError as e:
                raise FileIOError(f"Cannot create directory: {e}", d) from e

    @staticmethod
    def orientation_for(ratio: float) -> Orientation:
        return Orientation.from_ratio(ratio)

    def destination_for(self, path: str, orientation: Orientation) -> str:
        directory = self.horizontal_dir if orientation is Orientation.HORIZONTAL else self.vertical_dir
        return os.path.join(directory, os.path.basename(path))

    def place(self, path: str, orientation: Orientation) -> str:
        """Move `path` into its destination and return the new path.

        On failure the file stays at `path`.
        """
        new_path = self.destination_for(path, orientation)
        try:
            os.replace(path, new_path)
        except OSError as e:
            raise FileIOError(f"Cannot move file to {new_path}: {e}", path) from e
        return new_path
