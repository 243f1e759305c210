"""Aspect ratio extraction from downloaded images.

Pillow's Image.open only parses the header to learn the size; pixel data is
never decoded here.
"""

import logging
from typing import Optional

from PIL import Image, UnidentifiedImageError

from .errors import DecodeError, UnsupportedFormatError
from .models import ImageMetadata

logger = logging.getLogger("subreddit_scraper")

# Declared content type -> Pillow format name
CODECS = {
    "image/jpeg": "JPEG",
    "image/png": "PNG",
}


def normalize_content_type(content_type: Optional[str]) -> str:
    """'image/JPEG; charset=binary' -> 'image/jpeg'."""
    if not content_type:
        return ""
    return content_type.split(";", 1)[0].strip().lower()


def codec_for(content_type: Optional[str]) -> str:
    ct = normalize_content_type(content_type)
    codec = CODECS.get(ct)
    if codec is None:
        raise UnsupportedFormatError(f"Unsupported content type '{ct or 'missing'}'")
    return codec


def read_metadata(path: str, content_type: Optional[str]) -> ImageMetadata:
    """Read width and height of the image at `path`.

    Raises UnsupportedFormatError before touching the file when the declared
    type is not JPEG or PNG, and DecodeError when the header cannot be parsed
    as the declared format.
    """
    codec = codec_for(content_type)

    try:
        with open(path, "rb") as fp:
            with Image.open(fp, formats=[codec]) as img:
                width, height = img.size
    except UnidentifiedImageError as e:
        raise DecodeError(f"Not a readable {codec} image", path) from e
    except Image.DecompressionBombError as e:
        raise DecodeError(f"Image too large to open: {e}", path) from e
    except (OSError, SyntaxError, ValueError) as e:
        raise DecodeError(f"Corrupt {codec} header: {e}", path) from e

    if width <= 0 or height <= 0:
        raise DecodeError(f"Invalid dimensions {width}x{height}", path)

    logger.debug(f"{path}: {codec} {width}x{height}")
    return ImageMetadata(width=width, height=height, content_type=normalize_content_type(content_type))


def aspect_ratio(path: str, content_type: Optional[str]) -> float:
    return read_metadata(path, content_type).aspect_ratio
