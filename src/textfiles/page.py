"""Page classification: directory listing or plain text document."""

from dataclasses import dataclass
from urllib.parse import urlparse

from .config import DIRECTORY_LISTING_PATH, SITE_NAME, settings
from .extract import Entry, parse_directory_html, parse_file_listing, parse_page_title

MARKUP_PREFIXES = ("<!doctype", "<html>")
SNIFF_LENGTH = 15
DOCUMENT_FALLBACK_TITLE = "file"


@dataclass(frozen=True)
class Directory:
    """Listing body: entries in document order."""

    entries: tuple[Entry, ...]


@dataclass(frozen=True)
class Document:
    """Plain text body, exactly as received."""

    text: str


Body = Directory | Document


@dataclass(frozen=True)
class Page:
    """A successfully loaded page."""

    url: str
    title: str
    body: Body

    @property
    def is_directory(self) -> bool:
        return isinstance(self.body, Directory)

    @property
    def entries(self) -> tuple[Entry, ...]:
        match self.body:
            case Directory(entries=entries):
                return entries
            case Document():
                return ()

    @property
    def text(self) -> str | None:
        match self.body:
            case Document(text=text):
                return text
            case Directory():
                return None


def is_markup(body: str) -> bool:
    """Sniff the first characters of body for an HTML preamble."""
    head = body.lstrip()[:SNIFF_LENGTH].lower()
    return head.startswith(MARKUP_PREFIXES)


def title_from_url(url: str, fallback: str) -> str:
    """Last non-empty path segment of url, or fallback when there is none."""
    segments = [s for s in urlparse(url).path.split("/") if s]
    return segments[-1] if segments else fallback


def classify_and_parse(url: str, body: str, site_root: str | None = None) -> Page:
    """Turn a fetched body into a Page.

    Markup at the top-level listing is parsed with the directory layout, any
    other markup with the file-listing layout. Everything else is a text
    document. Never raises: unexpected markup just yields fewer entries.
    """
    if not is_markup(body):
        return Page(
            url=url,
            title=title_from_url(url, DOCUMENT_FALLBACK_TITLE),
            body=Document(body),
        )

    if url.endswith(DIRECTORY_LISTING_PATH):
        entries = parse_directory_html(body, site_root or settings.site_root)
    else:
        entries = parse_file_listing(body, url)

    title = parse_page_title(body) or title_from_url(url, SITE_NAME).upper()
    return Page(url=url, title=title, body=Directory(tuple(entries)))
