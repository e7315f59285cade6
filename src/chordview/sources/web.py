"""Source for songs published on the web.

Two response shapes are accepted:

    text/plain   the body is the song text, used as-is
    text/html    the song text is the first <pre> block on the page

Inside a ``<pre>`` block, ``<br>`` tags become newlines and other tags
(links, emphasis) contribute their text.
"""

import logging

import httpx
from bs4 import BeautifulSoup, Comment, NavigableString, Tag

from ..exceptions import FetchError, ParseError
from .base import SongSource

logger = logging.getLogger(__name__)

_FETCH_HEADERS = {
    "User-Agent": "chordview/0.1 (+https://pypi.org/project/chordview/)",
    "Accept": "text/plain,text/html;q=0.9,*/*;q=0.5",
}


class HttpSource(SongSource):
    """Read a song from an ``http://`` or ``https://`` URL."""

    @classmethod
    def can_handle(cls, location: str) -> bool:
        return location.startswith(("http://", "https://"))

    def read(self, location: str) -> str:
        html_or_text, content_type = self.fetch(location)
        if "html" in content_type:
            return self.extract(html_or_text, location)
        return html_or_text

    def fetch(self, url: str) -> tuple[str, str]:
        """Return ``(body, content_type)`` for *url*."""
        logger.debug("Fetching %s", url)
        try:
            resp = httpx.get(url, headers=_FETCH_HEADERS, follow_redirects=True, timeout=15)
        except httpx.RequestError as exc:
            raise FetchError(url, 0) from exc
        if resp.status_code != 200:
            raise FetchError(url, resp.status_code)
        return resp.text, resp.headers.get("content-type", "").lower()

    def extract(self, html: str, url: str) -> str:
        """Return the song text from the first ``<pre>`` block of *html*."""
        soup = BeautifulSoup(html, "html.parser")
        pre = soup.find("pre")
        if not pre:
            raise ParseError(url, "Could not find a <pre> block")
        return _pre_text(pre)


def _pre_text(pre_element: Tag) -> str:
    """Collect the text of a ``<pre>`` block, treating ``<br>`` as a newline.

    HTML comments are skipped.
    """
    parts: list[str] = []
    for node in pre_element.descendants:
        if isinstance(node, NavigableString) and not isinstance(node, Comment):
            parts.append(str(node))
        elif isinstance(node, Tag) and node.name == "br":
            parts.append("\n")
    return "".join(parts)
