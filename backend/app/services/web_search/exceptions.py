"""Error taxonomy for the web search service.

Per-URL extraction failures are not exceptions; they are reported through
``ExtractionStatus``. Only request-level failures are raised.
"""

from typing import Any, Optional


class WebSearchError(Exception):
    """Base class for errors that abort a whole request."""

    status_code: int = 500

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        details: Optional[Any] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.details = details

    def to_dict(self) -> dict:
        body: dict[str, Any] = {"error": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body


class QueryValidationError(WebSearchError):
    """Missing or malformed query or URL."""

    status_code = 400


class UpstreamSearchError(WebSearchError):
    """The search provider returned a non-success or application-level error."""

    status_code = 502


class InternalError(WebSearchError):
    """Unexpected failure while serving a request."""

    status_code = 500

    def __init__(
        self,
        message: str = "Internal server error processing request.",
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)


class SearchNotConfiguredError(InternalError):
    """Search mode requested but no provider API key is configured."""

    def __init__(self) -> None:
        super().__init__("Search API key not configured.")
