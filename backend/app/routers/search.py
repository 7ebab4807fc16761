"""Web search API router."""

from typing import Optional, Union

from fastapi import APIRouter, Depends, Query

from app.models.web_search import DirectFetchResponse, ErrorResponse, SearchResponse
from app.services.web_search import QueryRouter, get_query_router

router = APIRouter(prefix="/api", tags=["search"])


@router.get(
    "/search",
    response_model=Union[SearchResponse, DirectFetchResponse],
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
    },
)
async def search(
    query: Optional[str] = Query(
        None, description="Search text, or 'url:<address>' to extract one page"
    ),
    query_router: QueryRouter = Depends(get_query_router),
) -> Union[SearchResponse, DirectFetchResponse]:
    """
    Search the web and extract readable text from the top results.

    - Plain text: runs a web search; the first results are fetched and their
      main content extracted, the rest are returned as skipped.
    - ``url:https://...``: extracts that single page directly.

    Every result carries ``extracted_content_status``; failed extractions
    still return the provider's title and snippet.
    """
    return await query_router.handle(query)
