"""YAML config loader."""

import os
from dataclasses import dataclass, field
from typing import List, Optional

import yaml
from dotenv import find_dotenv, load_dotenv

from .errors import ConfigError

SORT_MODES = ("hot", "new", "rising", "top", "controversial")


@dataclass
class CredentialsConfig:
    user: str = ""
    password: str = ""
    client_id: str = ""
    client_secret: str = ""


@dataclass
class SubredditConfig:
    name: str = "earthporn"
    sort: str = "hot"
    limit: int = 25
    allowed_extensions: List[str] = field(default_factory=lambda: ["jpg", "png"])
    max_concurrency: int = 0  # 0 = one worker per eligible URL


@dataclass
class DownloadConfig:
    timeout: Optional[float] = None  # None = no deadline
    user_agent: str = "subreddit-scraper/1.0 (image orientation sorter)"
    chunk_size: int = 65536


@dataclass
class OutputConfig:
    work_dir: str = "."
    horizontal_dir: str = "hori"
    vertical_dir: str = "vert"


@dataclass
class AppConfig:
    log_dir: str = "logs"
    credentials: CredentialsConfig = field(default_factory=CredentialsConfig)
    subreddit: SubredditConfig = field(default_factory=SubredditConfig)
    download: DownloadConfig = field(default_factory=DownloadConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    def validate(self) -> "AppConfig":
        if self.subreddit.limit < 1:
            raise ConfigError(f"submission limit must be at least 1, got {self.subreddit.limit}")
        if self.subreddit.max_concurrency < 0:
            raise ConfigError(
                f"max-concurrency must be 0 (unbounded) or positive, got {self.subreddit.max_concurrency}"
            )
        if self.subreddit.sort not in SORT_MODES:
            raise ConfigError(f"unknown sort mode '{self.subreddit.sort}', expected one of {SORT_MODES}")
        if self.download.chunk_size < 1:
            raise ConfigError(f"chunk_size must be at least 1, got {self.download.chunk_size}")
        return self


def _credentials_from(raw: dict) -> CredentialsConfig:
    app = raw.get("app") or {}
    creds = CredentialsConfig(
        user=raw.get("user", ""),
        password=raw.get("password", ""),
        client_id=app.get("client-id", ""),
        client_secret=app.get("client-secret", ""),
    )
    # Environment (and .env) overrides the file
    creds.user = os.environ.get("REDDIT_USER") or creds.user
    creds.password = os.environ.get("REDDIT_PASSWORD") or creds.password
    creds.client_id = os.environ.get("REDDIT_CLIENT_ID") or creds.client_id
    creds.client_secret = os.environ.get("REDDIT_CLIENT_SECRET") or creds.client_secret
    return creds


def _subreddit_from(raw: dict) -> SubredditConfig:
    subs = raw.get("submissions") or {}
    defaults = SubredditConfig()
    extensions = subs.get("allowedExtensions", defaults.allowed_extensions)
    try:
        return SubredditConfig(
            name=raw.get("name", defaults.name),
            sort=raw.get("sort", defaults.sort),
            limit=int(subs.get("limit", defaults.limit)),
            allowed_extensions=[str(ext) for ext in (extensions or [])],
            max_concurrency=int(subs.get("max-concurrency") or 0),
        )
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid subreddit section: {e}") from e


def load_config(config_path: str = "config.yaml") -> AppConfig:
    load_dotenv(find_dotenv(usecwd=True))

    try:
        with open(config_path) as f:
            raw = yaml.safe_load(f) or {}
    except OSError as e:
        raise ConfigError(f"Cannot read config file: {e}", config_path) from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Malformed YAML: {e}", config_path) from e

    dl_raw = raw.get("download") or {}
    download = DownloadConfig(**{k: v for k, v in dl_raw.items() if k in DownloadConfig.__dataclass_fields__})

    out_raw = raw.get("output") or {}
    output = OutputConfig(**{k: v for k, v in out_raw.items() if k in OutputConfig.__dataclass_fields__})

    config = AppConfig(
        log_dir=raw.get("log_dir", "logs"),
        credentials=_credentials_from(raw.get("credentials") or {}),
        subreddit=_subreddit_from(raw.get("subreddit") or {}),
        download=download,
        output=output,
    )
    return config.validate()
