"""Data models for the scraper."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class Orientation(Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"

    @classmethod
    def from_ratio(cls, ratio: float) -> "Orientation":
        # A square image is not wider than it is tall
        return cls.HORIZONTAL if ratio > 1.0 else cls.VERTICAL


@dataclass
class Submission:
    url: str
    id: str = ""
    title: str = ""
    permalink: str = ""

    @classmethod
    def from_listing(cls, data: dict) -> "Submission":
        return cls(
            url=data.get("url", ""),
            id=data.get("id", ""),
            title=data.get("title", ""),
            permalink=data.get("permalink", ""),
        )


@dataclass
class ImageMetadata:
    width: int
    height: int
    content_type: str

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height


@dataclass
class FetchOutcome:
    url: str
    # Filled on success
    local_path: Optional[str] = None
    orientation: Optional[Orientation] = None
    aspect_ratio: Optional[float] = None
    # Filled on failure
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class BatchResult:
    outcomes: List[FetchOutcome] = field(default_factory=list)
    error: Optional[Exception] = None  # first failure by completion order

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def succeeded(self) -> List[FetchOutcome]:
        return [o for o in self.outcomes if o.ok]

    @property
    def failed(self) -> List[FetchOutcome]:
        return [o for o in self.outcomes if not o.ok]

    def count(self, orientation: Orientation) -> int:
        return sum(1 for o in self.succeeded if o.orientation is orientation)
