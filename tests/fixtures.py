"""Test helpers: generated images and a fake image host."""
from __future__ import annotations

import threading
from io import BytesIO

import httpx
from PIL import Image


def image_bytes(fmt: str, size: tuple[int, int]) -> bytes:
    """Encode a blank RGB image of `size` as JPEG or PNG."""
    buf = BytesIO()
    Image.new("RGB", size, (40, 90, 160)).save(buf, format=fmt)
    return buf.getvalue()


class FakeImageHost:
    """Serves registered URLs through httpx.MockTransport.

    Unknown URLs get a 404. Every request is recorded as (method, url).
    """

    def __init__(self):
        self.files: dict[str, tuple[bytes, str, int]] = {}
        self.requests: list[tuple[str, str]] = []
        self._lock = threading.Lock()

    def add(self, url: str, data: bytes, content_type: str, status: int = 200) -> str:
        self.files[url] = (data, content_type, status)
        return url

    def add_image(self, url: str, fmt: str, size: tuple[int, int]) -> str:
        ct = "image/jpeg" if fmt == "JPEG" else "image/png"
        return self.add(url, image_bytes(fmt, size), ct)

    def handler(self, request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        with self._lock:
            self.requests.append((request.method, url))

        if url not in self.files:
            return httpx.Response(404, content=b"not found")

        data, content_type, status = self.files[url]
        headers = {"content-type": content_type, "content-length": str(len(data))}
        if request.method == "HEAD":
            return httpx.Response(status, headers=headers)
        return httpx.Response(status, headers=headers, content=data)

    def client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self.handler))
