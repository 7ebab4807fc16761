"""Main-content isolation behind a small capability interface.

``PageExtractor`` only depends on :class:`ContentIsolator`, so the
readability heuristic can be swapped (or stubbed in tests) without touching
the extraction contract.
"""

import logging
import re
from dataclasses import dataclass
from typing import Optional, Protocol

import lxml.html
from readability import Document
from readability.readability import Unparseable

logger = logging.getLogger(__name__)

# readability-lxml's placeholder when a page has no <title>
_NO_TITLE = "[no-title]"

# lxml refuses str input that still carries an encoding declaration
_XML_DECLARATION = re.compile(r"^\s*<\?xml[^>]*\?>")


@dataclass(frozen=True)
class ParsedDocument:
    """An HTML page parsed once, with links resolved against its URL."""

    url: str
    html: str
    tree: lxml.html.HtmlElement
    title: Optional[str]


@dataclass(frozen=True)
class MainContent:
    """Best-guess article title and plain text."""

    title: Optional[str]
    text: str


class ContentIsolator(Protocol):
    """Anything that can pick the main article out of a document."""

    def extract_main_content(self, document: ParsedDocument) -> Optional[MainContent]:
        """Return the main content, or ``None`` when nothing usable is found."""
        ...


def parse_document(html: str, url: str) -> ParsedDocument:
    """Parse *html* into a navigable tree anchored at *url*.

    Raises:
        lxml.etree.ParserError: If the markup cannot be parsed at all.
    """
    tree = lxml.html.document_fromstring(
        _XML_DECLARATION.sub("", html, count=1), base_url=url
    )
    tree.make_links_absolute(url, handle_failures="discard")

    title_text = tree.findtext(".//title")
    title = " ".join(title_text.split()) if title_text else None

    return ParsedDocument(url=url, html=html, tree=tree, title=title or None)


def html_to_text(fragment: str) -> str:
    """Flatten an HTML fragment to text: one stripped line per block, no blanks."""
    if not fragment or not fragment.strip():
        return ""
    root = lxml.html.fromstring(fragment)
    lines = (line.strip() for line in root.text_content().splitlines())
    return "\n".join(line for line in lines if line)


class ReadabilityIsolator:
    """``ContentIsolator`` backed by readability-lxml.

    Frequently finds nothing on JavaScript-rendered pages, forms, SPAs and
    paywall stubs; that is reported as ``None``, not as an error.
    """

    def __init__(self, *, min_text_length: int = 25) -> None:
        self.min_text_length = min_text_length

    def extract_main_content(self, document: ParsedDocument) -> Optional[MainContent]:
        # readability cleans a copy, so the shared tree is left untouched
        readable = Document(
            document.tree,
            url=document.url,
            min_text_length=self.min_text_length,
        )
        try:
            summary = readable.summary(html_partial=True)
        except Unparseable as e:
            logger.debug(f"Readability could not parse {document.url}: {e}")
            return None

        text = html_to_text(summary)
        if not text:
            return None

        title = readable.short_title() or readable.title()
        if not title or title == _NO_TITLE:
            title = None

        return MainContent(title=title, text=text)
