from app.services.web_search import (
    PageExtractor,
    QueryRouter,
    ResultAggregator,
    get_query_router,
    reset_query_router,
)

__all__ = [
    # Extraction pipeline
    "PageExtractor",
    "ResultAggregator",
    # Query routing
    "QueryRouter",
    "get_query_router",
    "reset_query_router",
]
