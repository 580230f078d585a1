"""Entry extraction from textfiles.com listing pages using CSS selectors."""

import re
from dataclasses import dataclass
from enum import Enum

from selectolax.parser import HTMLParser, Node

MAX_DIRECTORY_NAME_LENGTH = 50
HEADER_LABELS = ("Name", "Filename")
PARENT_DIRECTORY = "../"
URL_SCHEME = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*:")


class EntryKind(Enum):
    """Whether an entry leads to another listing or to a file."""

    DIRECTORY = "directory"
    FILE = "file"


@dataclass(frozen=True)
class Entry:
    """One link in a directory listing."""

    name: str
    location: str
    description: str
    kind: EntryKind

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY


def _text(node: Node) -> str:
    return node.text().strip()


def _first_link(node: Node) -> tuple[str, str] | None:
    """Return (href, text) of the first <a> under node, if it carries an href."""
    link = node.css_first("a")
    if link is None:
        return None
    href = link.attributes.get("href")
    if href is None:
        return None
    return href, _text(link)


def _next_cell(td: Node) -> Node | None:
    sibling = td.next
    while sibling is not None and sibling.tag != "td":
        sibling = sibling.next
    return sibling


def _directory_description(td: Node) -> str:
    """Italic text in the cell, else in a link-free cell right after it."""
    italic = td.css_first("i")
    if italic is None:
        neighbour = _next_cell(td)
        if neighbour is not None and neighbour.css_first("a") is None:
            italic = neighbour.css_first("i")
    return _text(italic) if italic is not None else ""


def parse_directory_html(html: str, site_root: str) -> list[Entry]:
    """Extract top-level directories from the site's directory.html.

    Each directory sits in its own table cell as
    ``<B><A HREF="dirname">Display Name</A></B><BR><I>Description</I>``;
    some rows carry the description in the following cell instead. Only
    bare directory names are accepted as targets.
    """
    tree = HTMLParser(html)
    root = site_root.rstrip("/")
    entries = []

    for td in tree.css("td"):
        link = _first_link(td)
        if link is None:
            continue
        href, name = link

        if not href or any(c in href for c in "./:"):
            continue
        if not name or len(name) > MAX_DIRECTORY_NAME_LENGTH:
            continue

        entries.append(Entry(
            name=name,
            location=f"{root}/{href}/",
            description=_directory_description(td),
            kind=EntryKind.DIRECTORY,
        ))

    return entries


def parse_file_listing(html: str, base_url: str) -> list[Entry]:
    """Extract entries from a per-directory file table.

    Rows look like ``<TR><TD><A HREF="file.txt">file.txt</A></TD><TD>size</TD>
    <TD>description</TD></TR>``. Header rows, the parent link, sort-order
    query links and absolute links are skipped.
    """
    tree = HTMLParser(html)
    base = base_url.rstrip("/")
    entries = []

    for tr in tree.css("tr"):
        cells = tr.css("td")
        if not cells:
            continue

        link = _first_link(cells[0])
        if link is None:
            continue
        href, name = link

        if href == PARENT_DIRECTORY or href.startswith(("?", "/")) or URL_SCHEME.match(href):
            continue
        if not name or name in HEADER_LABELS:
            continue

        description = _text(cells[-1]) if len(cells) >= 3 else ""

        entries.append(Entry(
            name=name.rstrip("/"),
            location=f"{base}/{href}",
            description=description,
            kind=EntryKind.DIRECTORY if href.endswith("/") else EntryKind.FILE,
        ))

    return entries


def parse_page_title(html: str) -> str | None:
    """Return the trimmed <title> text, or None when missing or blank."""
    node = HTMLParser(html).css_first("title")
    if node is None:
        return None
    return _text(node) or None
