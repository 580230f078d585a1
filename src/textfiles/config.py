"""Configuration using pydantic-settings."""

from urllib.parse import urlparse

from pydantic_settings import BaseSettings

HOME_URL = "http://textfiles.com/directory.html"
DIRECTORY_LISTING_PATH = "directory.html"
SITE_NAME = "TEXTFILES.COM"


def site_root_of(url: str) -> str:
    """Scheme and host of url, without a trailing slash."""
    parsed = urlparse(url)
    return f"{parsed.scheme}://{parsed.netloc}"


class BrowserSettings(BaseSettings):
    """Browser configuration."""

    home_url: str = HOME_URL
    timeout: float = 30.0
    user_agent: str = "TextfilesBrowser/1.0"
    max_attempts: int = 3
    retry_delay: float = 1.0

    model_config = {"env_prefix": "TEXTFILES_"}

    @property
    def site_root(self) -> str:
        """Scheme and host of the home URL, without a trailing slash."""
        return site_root_of(self.home_url)


settings = BrowserSettings()
