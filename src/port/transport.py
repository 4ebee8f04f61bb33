"""Transport port — outbound interface for fetching JSON over HTTP."""

from typing import Any, Protocol


class JsonTransport(Protocol):
    """Port for retrieving and decoding a JSON document.

    get_json() returns the decoded body. Implementations raise
    TransportError when the request itself fails and
    MalformedResponseError when the body is not JSON. Timeouts and any
    retry policy belong to the implementation, not to its callers.
    """

    async def get_json(self, url: str) -> Any: ...
