"""Web search package: search, fetch, and readable-text extraction.

Re-exports the public API so consumers can use::

    from app.services.web_search import QueryRouter, get_query_router
"""

from app.services.web_search.content_isolator import (
    ContentIsolator,
    MainContent,
    ParsedDocument,
    ReadabilityIsolator,
)
from app.services.web_search.exceptions import (
    InternalError,
    QueryValidationError,
    SearchNotConfiguredError,
    UpstreamSearchError,
    WebSearchError,
)
from app.services.web_search.page_extractor import PageExtractor
from app.services.web_search.query_router import (
    QueryRouter,
    build_query_router,
    get_query_router,
    reset_query_router,
    route_query,
)
from app.services.web_search.result_aggregator import ResultAggregator
from app.services.web_search.search_provider import (
    BraveSearchProvider,
    SearchProvider,
    SerpApiProvider,
    build_search_provider,
)

__all__ = [
    "BraveSearchProvider",
    "ContentIsolator",
    "InternalError",
    "MainContent",
    "PageExtractor",
    "ParsedDocument",
    "QueryRouter",
    "QueryValidationError",
    "ReadabilityIsolator",
    "ResultAggregator",
    "SearchNotConfiguredError",
    "SearchProvider",
    "SerpApiProvider",
    "UpstreamSearchError",
    "WebSearchError",
    "build_query_router",
    "build_search_provider",
    "get_query_router",
    "reset_query_router",
    "route_query",
]
