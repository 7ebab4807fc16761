"""Single-URL fetch → parse → readability → truncate pipeline.

``PageExtractor.extract`` never raises: every failure mode is folded into an
``ExtractionOutcome`` so one bad page cannot take down a whole search.
"""

import asyncio
import logging
from typing import Optional

import httpx

from app.models.web_search import ExtractionOutcome, ExtractionStatus
from app.services.web_search.constants import (
    ACCEPT_HEADER,
    ACCEPT_LANGUAGE_HEADER,
    DEFAULT_EXTRACTION_TIMEOUT_MS,
    DEFAULT_USER_AGENT,
    MAX_CONTENT_CHARS,
    STATUS_FETCH_FAILED,
    STATUS_PARSE_EMPTY,
    STATUS_SUCCESS,
    STATUS_TRANSPORT_ERROR,
)
from app.services.web_search.content_isolator import (
    ContentIsolator,
    MainContent,
    ParsedDocument,
    ReadabilityIsolator,
    parse_document,
)
from app.services.web_search.text_utils import truncate_text

logger = logging.getLogger(__name__)


class PageExtractor:
    """Turns one URL into a bounded plaintext excerpt or a typed failure."""

    def __init__(
        self,
        *,
        isolator: Optional[ContentIsolator] = None,
        timeout_ms: int = DEFAULT_EXTRACTION_TIMEOUT_MS,
        max_content_chars: int = MAX_CONTENT_CHARS,
        user_agent: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.isolator = isolator or ReadabilityIsolator()
        self.timeout_ms = timeout_ms
        self.max_content_chars = max_content_chars
        self.headers = {
            "User-Agent": user_agent or DEFAULT_USER_AGENT,
            "Accept": ACCEPT_HEADER,
            "Accept-Language": ACCEPT_LANGUAGE_HEADER,
        }
        # Injectable for tests (httpx.MockTransport)
        self._transport = transport

    async def extract(
        self, url: str, timeout_ms: Optional[int] = None
    ) -> ExtractionOutcome:
        """Fetch *url* and classify the result.

        Args:
            url: Absolute http(s) URL.
            timeout_ms: Deadline for the network fetch; defaults to the
                extractor's configured timeout.

        Returns:
            ``ExtractionOutcome`` with status ``SUCCESS``, ``FETCH_FAILED``,
            ``PARSE_EMPTY`` or ``TRANSPORT_ERROR``.
        """
        timeout_s = (timeout_ms if timeout_ms is not None else self.timeout_ms) / 1000
        logger.info(f"Fetching {url} (timeout {timeout_s:.1f}s)")

        try:
            response = await asyncio.wait_for(self._fetch(url, timeout_s), timeout_s)

            if not response.is_success:
                logger.warning(
                    f"Failed to fetch {url}: {response.status_code} "
                    f"{response.reason_phrase}"
                )
                return ExtractionOutcome(
                    status=ExtractionStatus.FETCH_FAILED,
                    status_detail=STATUS_FETCH_FAILED.format(
                        status_code=response.status_code
                    ),
                )

            html = response.text
            if not html.strip():
                logger.info(f"Empty body from {url}")
                return ExtractionOutcome(
                    status=ExtractionStatus.PARSE_EMPTY,
                    status_detail=STATUS_PARSE_EMPTY,
                )

            document, main = await asyncio.to_thread(self._parse, html, url)

        except Exception as e:
            error_name = type(e).__name__
            logger.warning(f"Error during fetch/parse of {url}: {error_name}: {e}")
            return ExtractionOutcome(
                status=ExtractionStatus.TRANSPORT_ERROR,
                status_detail=STATUS_TRANSPORT_ERROR.format(error_name=error_name),
            )

        if main is None:
            logger.info(
                f"No readable content in {url} (title: {document.title!r}); "
                "page may be JavaScript-heavy or not article-like"
            )
            return ExtractionOutcome(
                status=ExtractionStatus.PARSE_EMPTY,
                status_detail=STATUS_PARSE_EMPTY,
                title=document.title,
            )

        content = truncate_text(main.text, self.max_content_chars)
        title = main.title or document.title
        logger.info(f"Extracted {len(content)} chars from {url} (title: {title!r})")

        return ExtractionOutcome(
            status=ExtractionStatus.SUCCESS,
            status_detail=STATUS_SUCCESS,
            title=title,
            content=content,
        )

    async def _fetch(self, url: str, timeout_s: float) -> httpx.Response:
        # One client per call: concurrent extractions share nothing
        async with httpx.AsyncClient(
            headers=self.headers,
            timeout=timeout_s,
            follow_redirects=True,
            transport=self._transport,
        ) as client:
            return await client.get(url)

    def _parse(
        self, html: str, url: str
    ) -> tuple[ParsedDocument, Optional[MainContent]]:
        document = parse_document(html, url)
        main = self.isolator.extract_main_content(document)
        if main is not None:
            text = main.text.strip()
            main = MainContent(title=main.title, text=text) if text else None
        return document, main
