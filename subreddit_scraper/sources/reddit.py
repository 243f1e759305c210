"""Reddit OAuth API: password-grant login and subreddit listings."""

import logging
from typing import List, Optional

import httpx

from ..config import SORT_MODES
from ..errors import AuthError, ListingError
from ..models import Submission
from .base import BaseSource

logger = logging.getLogger("subreddit_scraper")


class RedditSource(BaseSource):
    name = "reddit"

    AUTH_URL = "https://www.reddit.com/api/v1/access_token"
    API_URL = "https://oauth.reddit.com"

    def __init__(self, config, client):
        super().__init__(config, client)
        self.access_token: Optional[str] = None

    def authenticate(self):
        creds = self.config.credentials
        if not (creds.client_id and creds.client_secret):
            raise AuthError("Reddit client id/secret not configured")

        try:
            resp = self.client.post(
                self.AUTH_URL,
                auth=(creds.client_id, creds.client_secret),
                data={
                    "grant_type": "password",
                    "username": creds.user,
                    "password": creds.password,
                },
            )
            resp.raise_for_status()
            body = resp.json()
        except httpx.HTTPError as e:
            raise AuthError(f"Reddit OAuth request failed: {e}") from e
        except ValueError as e:
            raise AuthError(f"Reddit OAuth returned invalid JSON: {e}") from e

        # Bad credentials come back as 200 {"error": "invalid_grant"}
        token = body.get("access_token") if isinstance(body, dict) else None
        if not token:
            err = body.get("error", "no access_token") if isinstance(body, dict) else "no access_token"
            raise AuthError(f"Reddit OAuth failed: {err}", creds.user or None)

        self.access_token = token
        logger.info(f"[{self.name}] Authenticated as u/{creds.user}")

    def list_submissions(self, subreddit: str, sort: str, limit: int) -> List[Submission]:
        if sort not in SORT_MODES:
            raise ListingError(f"Unknown sort '{sort}', expected one of {SORT_MODES}")
        if not self.access_token:
            raise ListingError("Not authenticated", subreddit)

        url = f"{self.API_URL}/r/{subreddit}/{sort}"
        headers = {"Authorization": f"bearer {self.access_token}"}

        try:
            resp = self.client.get(url, params={"limit": limit}, headers=headers)
            resp.raise_for_status()
            data = resp.json()
        except httpx.HTTPError as e:
            raise ListingError(f"Listing request failed: {e}", url) from e
        except ValueError as e:
            raise ListingError(f"Listing returned invalid JSON: {e}", url) from e

        try:
            children = data["data"]["children"]
        except (KeyError, TypeError) as e:
            raise ListingError(f"Unexpected listing shape, missing {e}", url) from e

        submissions = [Submission.from_listing(child.get("data") or {}) for child in children]
        return submissions[:limit]
