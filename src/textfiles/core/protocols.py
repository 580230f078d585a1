"""Protocol definitions for browser components."""

from dataclasses import dataclass
from typing import Protocol


@dataclass
class Response:
    """Fetched page: final URL, status, raw bytes and declared charset."""

    url: str
    status: int
    content: bytes
    headers: dict[str, str]
    encoding: str = "utf-8"

    @property
    def text(self) -> str:
        """Decode content with the charset the server declared."""
        return self.content.decode(self.encoding, errors="replace")


class Fetcher(Protocol):
    """Protocol for URL fetchers."""

    def fetch(self, url: str) -> Response:
        """Fetch a URL and return the response."""
        ...

    def close(self) -> None:
        ...
