"""Navigation state and history for browsing the archive."""

import logging
from dataclasses import dataclass, field

from .config import settings, site_root_of
from .core import Fetcher, HttpFetcher
from .extract import Entry
from .page import Page, classify_and_parse

logger = logging.getLogger(__name__)


@dataclass
class NavigationState:
    """Where the browser is and where it has been."""

    current_location: str
    history: list[str] = field(default_factory=list)


class Navigator:
    """Drives fetch and classification while keeping a back stack.

    ``navigate`` and ``go_back`` update the location before loading, and
    the update stays in place when the load fails: the location always
    names the page the user last asked for. Errors from the fetcher
    propagate unchanged. ``refresh`` never touches history or location.
    """

    def __init__(
        self,
        fetcher: Fetcher | None = None,
        home_url: str | None = None,
    ):
        self.home_url = home_url or settings.home_url
        self.site_root = site_root_of(self.home_url)
        self.fetcher = fetcher or HttpFetcher(
            timeout=settings.timeout,
            user_agent=settings.user_agent,
            max_attempts=settings.max_attempts,
            retry_delay=settings.retry_delay,
        )
        self.state = NavigationState(current_location=self.home_url)

    @property
    def current_location(self) -> str:
        return self.state.current_location

    @property
    def history(self) -> list[str]:
        """Copy of the back stack, oldest first."""
        return list(self.state.history)

    def can_go_back(self) -> bool:
        return bool(self.state.history)

    def _load(self, url: str) -> Page:
        response = self.fetcher.fetch(url)
        return classify_and_parse(url, response.text, site_root=self.site_root)

    def navigate(self, url: str) -> Page:
        """Move to url, pushing the current location onto history."""
        self.state.history.append(self.state.current_location)
        self.state.current_location = url
        logger.debug("navigate -> %s (history depth %d)", url, len(self.state.history))
        return self._load(url)

    def open(self, entry: Entry) -> Page:
        """Navigate to the location of a listing entry."""
        return self.navigate(entry.location)

    def home(self) -> Page:
        return self.navigate(self.home_url)

    def go_back(self) -> Page | None:
        """Return to the previous location, or None if there is none."""
        if not self.state.history:
            return None
        previous = self.state.history.pop()
        self.state.current_location = previous
        logger.debug("back -> %s (history depth %d)", previous, len(self.state.history))
        return self._load(previous)

    def refresh(self) -> Page:
        """Reload the current location."""
        logger.debug("refresh %s", self.state.current_location)
        return self._load(self.state.current_location)

    def close(self):
        self.fetcher.close()

    def __enter__(self) -> "Navigator":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
