"""Query classification and dispatch.

A query starting with ``url:`` (any case) is a direct extraction of that
URL; anything else is a web search whose results go through the
``ResultAggregator``.
"""

import asyncio
import logging
from typing import Optional, Union

from app.config import get_settings
from app.models.web_search import (
    DirectFetch,
    DirectFetchResponse,
    RoutedRequest,
    SearchQuery,
    SearchResponse,
)
from app.services.web_search.constants import NOT_AVAILABLE, SNIPPET_CHARS
from app.services.web_search.exceptions import (
    InternalError,
    QueryValidationError,
    SearchNotConfiguredError,
)
from app.services.web_search.page_extractor import PageExtractor
from app.services.web_search.result_aggregator import ResultAggregator
from app.services.web_search.search_provider import (
    SearchProvider,
    build_search_provider,
)
from app.services.web_search.text_utils import is_http_url, truncate_text

logger = logging.getLogger(__name__)

DIRECT_FETCH_PREFIX = "url:"

# Singleton state
_router: Optional["QueryRouter"] = None
_lock = asyncio.Lock()


def route_query(raw_query: Optional[str]) -> RoutedRequest:
    """Classify *raw_query* as a direct fetch or a search.

    Raises:
        QueryValidationError: If the query is blank, or carries the ``url:``
            prefix without a valid absolute http(s) URL after it.
    """
    if raw_query is None or not raw_query.strip():
        raise QueryValidationError("Missing query parameter")

    if raw_query[: len(DIRECT_FETCH_PREFIX)].lower() == DIRECT_FETCH_PREFIX:
        url = raw_query[len(DIRECT_FETCH_PREFIX) :].strip()
        if not is_http_url(url):
            raise QueryValidationError("Invalid URL for direct fetching.")
        return DirectFetch(url=url)

    return SearchQuery(text=raw_query)


class QueryRouter:
    """Entry point for one incoming query."""

    def __init__(
        self,
        page_extractor: PageExtractor,
        aggregator: ResultAggregator,
        search_provider: Optional[SearchProvider] = None,
        *,
        snippet_chars: int = SNIPPET_CHARS,
    ) -> None:
        self.page_extractor = page_extractor
        self.aggregator = aggregator
        self.search_provider = search_provider
        self.snippet_chars = snippet_chars

    async def handle(
        self, raw_query: Optional[str]
    ) -> Union[DirectFetchResponse, SearchResponse]:
        """Route *raw_query* and run the matching pipeline."""
        request = route_query(raw_query)
        if isinstance(request, DirectFetch):
            return await self.direct_fetch(request)
        return await self.search(request)

    async def direct_fetch(self, request: DirectFetch) -> DirectFetchResponse:
        logger.info(f"Direct URL fetch requested for: {request.url}")
        outcome = await self.page_extractor.extract(request.url)

        snippet = NOT_AVAILABLE
        if outcome.content:
            snippet = truncate_text(outcome.content, self.snippet_chars)

        return DirectFetchResponse(
            source_url=request.url,
            title=outcome.title or NOT_AVAILABLE,
            snippet=snippet,
            extracted_content=outcome.content,
            extracted_content_status=outcome.status,
            extracted_content_status_detail=outcome.status_detail,
        )

    async def search(self, request: SearchQuery) -> SearchResponse:
        if self.search_provider is None:
            logger.error("Search requested but no search API key is configured")
            raise SearchNotConfiguredError()

        # UpstreamSearchError propagates unchanged
        candidates = await self.search_provider.search(request.text)

        try:
            results = await self.aggregator.aggregate(candidates)
        except Exception as e:
            logger.exception(f"Aggregation failed for {request.text!r}: {e}")
            raise InternalError() from e

        logger.info(f"Returning {len(results)} processed results")
        return SearchResponse(
            query=request.text,
            provider=self.search_provider.name,
            organic_results=results,
        )


# =====================================================================
# Singleton factory (thread-safe via asyncio.Lock)
# =====================================================================


def build_query_router() -> QueryRouter:
    """Wire a ``QueryRouter`` from application settings."""
    settings = get_settings()

    page_extractor = PageExtractor(
        timeout_ms=settings.extraction_timeout_ms,
        max_content_chars=settings.max_content_chars,
        user_agent=settings.user_agent,
    )
    aggregator = ResultAggregator(
        page_extractor,
        max_processed=settings.max_processed_results,
        restricted_domains=settings.restricted_domains,
    )
    return QueryRouter(
        page_extractor,
        aggregator,
        build_search_provider(settings),
        snippet_chars=settings.snippet_chars,
    )


async def get_query_router() -> QueryRouter:
    """Get or create the singleton ``QueryRouter``."""
    global _router
    if _router is not None:
        return _router

    async with _lock:
        # Double-checked locking
        if _router is None:
            _router = build_query_router()

    return _router


def reset_query_router() -> None:
    """Reset router for testing."""
    global _router
    _router = None
