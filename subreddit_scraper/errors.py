"""Exception hierarchy for the scraper."""

from typing import Optional


class ScraperError(Exception):
    """Base class for every error the scraper raises on purpose."""

    def __init__(self, message: str, target: Optional[str] = None):
        super().__init__(message)
        self.target = target

    def __str__(self) -> str:
        msg = super().__str__()
        if self.target:
            return f"{msg} ({self.target})"
        return msg


class ConfigError(ScraperError):
    pass


class NamingError(ScraperError):
    """No local filename can be derived from a URL."""


class FileIOError(ScraperError):
    """Creating, writing or moving a local file failed."""


class NetworkError(ScraperError):
    """A HEAD/GET request or the body stream failed."""


class DecodeError(ScraperError):
    """The image header is truncated, corrupt or not the declared format."""


class UnsupportedFormatError(ScraperError):
    """The declared content type is not one of the supported raster formats."""


class AuthError(ScraperError):
    pass


class ListingError(ScraperError):
    pass
