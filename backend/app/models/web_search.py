"""Web search and page extraction models."""

from enum import Enum
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ExtractionStatus(str, Enum):
    """Outcome classes of a single page extraction attempt."""

    SUCCESS = "success"
    FETCH_FAILED = "fetch_failed"
    PARSE_EMPTY = "parse_empty"
    TRANSPORT_ERROR = "transport_error"
    SKIPPED = "skipped"


# =============================================================================
# Search Provider Models
# =============================================================================


class SearchCandidate(BaseModel):
    """One ranked item returned by the search provider."""

    model_config = ConfigDict(frozen=True)

    rank: int = Field(..., ge=0, description="Position in the provider's list")
    title: str = Field("", description="Result title from the provider")
    url: Optional[str] = Field(None, description="Result link, if any")
    snippet: str = Field("", description="Provider snippet/description")


# =============================================================================
# Extraction Models
# =============================================================================


class ExtractionOutcome(BaseModel):
    """Typed result of trying to obtain readable text from one URL.

    ``content`` is set if and only if ``status`` is ``SUCCESS``.
    """

    model_config = ConfigDict(frozen=True)

    status: ExtractionStatus = Field(..., description="Outcome class")
    status_detail: str = Field(..., description="Human-readable explanation")
    title: Optional[str] = Field(None, description="Extracted or document title")
    content: Optional[str] = Field(None, description="Truncated main-content text")

    @model_validator(mode="after")
    def _content_matches_status(self) -> "ExtractionOutcome":
        has_content = self.content is not None
        if has_content != (self.status == ExtractionStatus.SUCCESS):
            raise ValueError("content must be present exactly when status is success")
        return self


class AnnotatedResult(BaseModel):
    """A search candidate with its extraction outcome merged in."""

    model_config = ConfigDict(frozen=True)

    rank: int = Field(..., ge=0, description="Position in the provider's list")
    title: str = Field("", description="Candidate title, or extracted title")
    url: Optional[str] = Field(None, description="Result link, if any")
    snippet: str = Field("", description="Provider snippet/description")
    extracted_content: Optional[str] = Field(
        None, description="Readable excerpt, present only on success"
    )
    extracted_content_status: ExtractionStatus = Field(
        ..., description="Extraction outcome class"
    )
    extracted_content_status_detail: str = Field(
        ..., description="Human-readable extraction status"
    )

    @classmethod
    def merge(
        cls, candidate: SearchCandidate, outcome: ExtractionOutcome
    ) -> "AnnotatedResult":
        """Attach *outcome* to *candidate*.

        The extracted title wins only when it is non-empty and differs from
        the provider's title.
        """
        title = candidate.title
        if outcome.title and outcome.title != candidate.title:
            title = outcome.title

        return cls(
            rank=candidate.rank,
            title=title,
            url=candidate.url,
            snippet=candidate.snippet,
            extracted_content=outcome.content,
            extracted_content_status=outcome.status,
            extracted_content_status_detail=outcome.status_detail,
        )


# =============================================================================
# Routed Requests
# =============================================================================


class DirectFetch(BaseModel):
    """Request to extract a single URL without searching."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["direct_fetch"] = "direct_fetch"
    url: str = Field(..., description="Absolute http(s) URL to extract")


class SearchQuery(BaseModel):
    """Free-text query forwarded verbatim to the search provider."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["search"] = "search"
    text: str = Field(..., description="Query text")


RoutedRequest = Annotated[Union[DirectFetch, SearchQuery], Field(discriminator="kind")]


# =============================================================================
# API Responses
# =============================================================================


class SearchResponse(BaseModel):
    """Search-mode response: one entry per provider result, in rank order."""

    query: str = Field(..., description="Original query")
    provider: str = Field(..., description="Search provider used")
    organic_results: list[AnnotatedResult] = Field(
        default_factory=list, description="Annotated results in provider order"
    )


class DirectFetchResponse(BaseModel):
    """Direct-fetch response for ``url:`` queries."""

    source_url: str = Field(..., description="URL that was extracted")
    title: str = Field("N/A", description="Extracted or document title")
    snippet: str = Field("N/A", description="Leading excerpt of the content")
    extracted_content: Optional[str] = Field(
        None, description="Readable excerpt, present only on success"
    )
    extracted_content_status: ExtractionStatus = Field(
        ..., description="Extraction outcome class"
    )
    extracted_content_status_detail: str = Field(
        ..., description="Human-readable extraction status"
    )


class ErrorResponse(BaseModel):
    """JSON body of every error response."""

    error: str = Field(..., description="Human-readable error message")
    details: Optional[Any] = Field(None, description="Upstream error details")
