"""HTTP fetcher implementation using httpx."""

import logging
import time

import httpx

from .protocols import Response

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "TextfilesBrowser/1.0"


class FetchError(Exception):
    """Raised when every attempt to fetch a URL has failed."""

    def __init__(self, url: str, attempts: int, cause: Exception):
        super().__init__(f"Failed to fetch {url} after {attempts} attempts: {cause}")
        self.url = url
        self.attempts = attempts
        self.cause = cause


class HttpFetcher:
    """Blocking HTTP fetcher using httpx with a fixed retry policy.

    Any failure (transport error, invalid URL, or a non-2xx status) consumes
    one attempt. Attempts are separated by a constant ``retry_delay`` sleep;
    once ``max_attempts`` is exhausted a :class:`FetchError` wrapping the last
    cause is raised.
    """

    def __init__(
        self,
        timeout: float = 30.0,
        user_agent: str = DEFAULT_USER_AGENT,
        max_attempts: int = 3,
        retry_delay: float = 1.0,
    ):
        self.timeout = httpx.Timeout(timeout)
        self.user_agent = user_agent
        self.max_attempts = max(1, max_attempts)
        self.retry_delay = retry_delay
        self._client: httpx.Client | None = None

    def _get_client(self) -> httpx.Client:
        """Get or create the HTTP client."""
        if self._client is None:
            self._client = httpx.Client(
                timeout=self.timeout,
                headers={"User-Agent": self.user_agent},
                follow_redirects=True,
            )
        return self._client

    def _try_fetch(self, url: str) -> Response:
        """Single GET attempt; raises on transport errors and non-2xx statuses."""
        client = self._get_client()
        resp = client.get(url)
        resp.raise_for_status()
        return Response(
            url=str(resp.url),
            status=resp.status_code,
            content=resp.content,
            headers=dict(resp.headers),
            encoding=resp.encoding or "utf-8",
        )

    def fetch(self, url: str) -> Response:
        """Fetch a URL, retrying on failure, and return the response."""
        last_error: Exception | None = None

        for attempt in range(1, self.max_attempts + 1):
            if attempt > 1:
                time.sleep(self.retry_delay)
            try:
                return self._try_fetch(url)
            except (httpx.HTTPError, httpx.InvalidURL) as e:
                last_error = e
                logger.warning(
                    "Attempt %d/%d for %s failed: %s", attempt, self.max_attempts, url, e
                )

        logger.error("Giving up on %s after %d attempts", url, self.max_attempts)
        raise FetchError(url, self.max_attempts, last_error) from last_error

    def close(self):
        """Close the HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> "HttpFetcher":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
