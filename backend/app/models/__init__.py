from app.models.web_search import (
    AnnotatedResult,
    DirectFetch,
    DirectFetchResponse,
    ErrorResponse,
    ExtractionOutcome,
    ExtractionStatus,
    RoutedRequest,
    SearchCandidate,
    SearchQuery,
    SearchResponse,
)

__all__ = [
    # Search provider models
    "SearchCandidate",
    # Extraction models
    "AnnotatedResult",
    "ExtractionOutcome",
    "ExtractionStatus",
    # Routed requests
    "DirectFetch",
    "RoutedRequest",
    "SearchQuery",
    # API responses
    "DirectFetchResponse",
    "ErrorResponse",
    "SearchResponse",
]
