"""In-memory implementation of JsonTransport for testing."""

from typing import Any


class FakeJsonTransport:
    """Fake transport that returns a preconfigured body or raises an error."""

    def __init__(self, body: Any = None, error: Exception | None = None):
        self.body = body
        self.error = error
        self.requested_urls: list[str] = []

    @property
    def last_url(self) -> str | None:
        return self.requested_urls[-1] if self.requested_urls else None

    async def get_json(self, url: str) -> Any:
        self.requested_urls.append(url)
        if self.error is not None:
            raise self.error
        return self.body
