"""Source registry."""

from .reddit import RedditSource

ALL_SOURCES = {
    "reddit": RedditSource,
}
