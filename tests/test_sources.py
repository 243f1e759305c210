"""Tests for the Reddit listing source."""
import logging

import httpx
import pytest

from subreddit_scraper.config import AppConfig, CredentialsConfig, SubredditConfig
from subreddit_scraper.errors import AuthError, ListingError
from subreddit_scraper.sources import ALL_SOURCES
from subreddit_scraper.sources.reddit import RedditSource


def listing(*urls):
    return {
        "kind": "Listing",
        "data": {
            "children": [
                {"kind": "t3", "data": {"id": f"id{i}", "title": f"post {i}", "url": u, "permalink": f"/r/x/{i}"}}
                for i, u in enumerate(urls)
            ]
        },
    }


class FakeReddit:
    def __init__(self, token_body=None, token_status=200, listing_body=None, listing_status=200):
        self.token_body = token_body if token_body is not None else {"access_token": "tok", "token_type": "bearer"}
        self.token_status = token_status
        self.listing_body = listing_body if listing_body is not None else listing()
        self.listing_status = listing_status
        self.requests = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.host == "www.reddit.com":
            return httpx.Response(self.token_status, json=self.token_body)
        return httpx.Response(self.listing_status, json=self.listing_body)


def make_source(fake, **sub):
    config = AppConfig(
        credentials=CredentialsConfig(user="bot", password="pw", client_id="cid", client_secret="secret"),
        subreddit=SubredditConfig(**sub),
    )
    client = httpx.Client(transport=httpx.MockTransport(fake.handler))
    return RedditSource(config, client)


class TestRedditSource:
    """Tests for RedditSource."""

    def test_registered(self):
        assert ALL_SOURCES["reddit"] is RedditSource

    def test_password_grant(self):
        fake = FakeReddit()
        source = make_source(fake)

        source.authenticate()

        req = fake.requests[0]
        assert req.method == "POST"
        assert str(req.url) == RedditSource.AUTH_URL
        body = req.content.decode()
        assert "grant_type=password" in body
        assert "username=bot" in body
        assert req.headers["authorization"].startswith("Basic ")
        assert source.access_token == "tok"

    def test_invalid_grant(self):
        source = make_source(FakeReddit(token_body={"error": "invalid_grant"}))

        with pytest.raises(AuthError, match="invalid_grant"):
            source.authenticate()

    def test_auth_http_error(self):
        source = make_source(FakeReddit(token_status=401, token_body={"message": "Unauthorized"}))

        with pytest.raises(AuthError):
            source.authenticate()

    def test_missing_app_credentials(self):
        fake = FakeReddit()
        source = make_source(fake)
        source.config.credentials.client_secret = ""

        with pytest.raises(AuthError):
            source.authenticate()
        assert fake.requests == []

    def test_list_submissions(self):
        fake = FakeReddit(listing_body=listing("https://i.redd.it/a.jpg", "https://v.redd.it/b"))
        source = make_source(fake)
        source.authenticate()

        subs = source.list_submissions("earthporn", "top", 10)

        assert [s.url for s in subs] == ["https://i.redd.it/a.jpg", "https://v.redd.it/b"]
        assert subs[0].title == "post 0"
        req = fake.requests[-1]
        assert req.url.path == "/r/earthporn/top"
        assert req.url.params["limit"] == "10"
        assert req.headers["authorization"] == "bearer tok"

    def test_listing_truncated_to_limit(self):
        fake = FakeReddit(listing_body=listing("https://x/1.jpg", "https://x/2.jpg", "https://x/3.jpg"))
        source = make_source(fake)
        source.authenticate()

        assert len(source.list_submissions("earthporn", "hot", 2)) == 2

    def test_list_before_auth(self):
        with pytest.raises(ListingError):
            make_source(FakeReddit()).list_submissions("earthporn", "hot", 5)

    def test_listing_http_error(self):
        source = make_source(FakeReddit(listing_status=503, listing_body={}))
        source.authenticate()

        with pytest.raises(ListingError):
            source.list_submissions("earthporn", "hot", 5)

    def test_listing_bad_shape(self):
        source = make_source(FakeReddit(listing_body={"kind": "Listing"}))
        source.authenticate()

        with pytest.raises(ListingError):
            source.list_submissions("earthporn", "hot", 5)

    def test_unknown_sort(self):
        source = make_source(FakeReddit())
        source.authenticate()

        with pytest.raises(ListingError, match="best-ever"):
            source.list_submissions("earthporn", "best-ever", 5)

    def test_discover_uses_config(self):
        fake = FakeReddit(listing_body=listing("https://x/a.jpg", ""))
        source = make_source(fake, name="pics", sort="new", limit=3)
        source.authenticate()

        urls = list(source.discover())

        assert urls == ["https://x/a.jpg"]
        assert fake.requests[-1].url.path == "/r/pics/new"

    def test_discover_logs_submission_details(self, caplog):
        fake = FakeReddit(listing_body=listing("https://x/a.jpg"))
        source = make_source(fake)
        source.authenticate()

        with caplog.at_level(logging.DEBUG, logger="subreddit_scraper"):
            list(source.discover())

        assert any("id0" in r.message and "post 0" in r.message and "/r/x/0" in r.message
                   for r in caplog.records)
