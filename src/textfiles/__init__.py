"""Terminal browser for the textfiles.com archive."""

__version__ = "0.1.0"
