"""Shared fixtures."""

import pytest

from textfiles.core import FetchError, Response


class FakeFetcher:
    """In-memory fetcher serving canned bodies and recording requests."""

    def __init__(self, pages: dict[str, str] | None = None):
        self.pages = dict(pages or {})
        self.requests: list[str] = []
        self.closed = False

    def fetch(self, url: str) -> Response:
        self.requests.append(url)
        if url not in self.pages:
            raise FetchError(url, 3, RuntimeError("HTTP 404 Not Found"))
        return Response(url=url, status=200, content=self.pages[url].encode("utf-8"), headers={})

    def close(self):
        self.closed = True


HOME_URL = "http://textfiles.com/directory.html"

HOME_HTML = """<!DOCTYPE html>
<html>
<head><title>T E X T F I L E S</title></head>
<body>
<table>
<tr>
<td><b><a href="apple">Apple II</a></b><br><i>Apple II programs and docs</i></td>
<td><b><a href="sci">Science</a></b><br><i>Science texts</i></td>
</tr>
</table>
</body>
</html>
"""

SCI_HTML = """<!DOCTYPE html>
<html>
<head><title>Science</title></head>
<body>
<table>
<tr><th>Filename</th><th>Size</th><th>Description</th></tr>
<tr><td><a href="../">Parent Directory</a></td><td></td><td></td></tr>
<tr><td><a href="quantum.txt">quantum.txt</a></td><td>12345</td><td>Notes on quantum mechanics</td></tr>
<tr><td><a href="physics/">physics/</a></td><td>-</td><td>Physics subdirectory</td></tr>
</table>
</body>
</html>
"""

QUANTUM_TXT = "QUANTUM MECHANICS FOR HACKERS\n\nChapter 1.\n"


@pytest.fixture
def site():
    return FakeFetcher({
        HOME_URL: HOME_HTML,
        "http://textfiles.com/sci/": SCI_HTML,
        "http://textfiles.com/sci/quantum.txt": QUANTUM_TXT,
    })
