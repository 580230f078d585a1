"""Core browser components."""

from .fetcher import FetchError, HttpFetcher
from .protocols import Fetcher, Response

__all__ = ["Fetcher", "Response", "HttpFetcher", "FetchError"]
