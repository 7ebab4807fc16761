"""Search provider clients (Brave Search, SerpAPI).

Each provider turns a free-text query into ranked ``SearchCandidate``
records. Provider errors are surfaced as ``UpstreamSearchError`` with the
provider's own status and body, never reinterpreted.
"""

import logging
from typing import Any, Optional, Protocol

import httpx

from app.config import Settings
from app.models.web_search import SearchCandidate
from app.services.web_search.exceptions import UpstreamSearchError

logger = logging.getLogger(__name__)


class SearchProvider(Protocol):
    name: str

    async def search(self, query: str) -> list[SearchCandidate]: ...


class _HttpSearchProvider:
    """Shared request/response handling for JSON search APIs."""

    name: str = ""
    endpoint: str = ""

    def __init__(
        self,
        api_key: str,
        *,
        result_count: int = 5,
        timeout_seconds: float = 8.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.api_key = api_key
        self.result_count = result_count
        self.timeout_seconds = timeout_seconds
        self._transport = transport

    async def search(self, query: str) -> list[SearchCandidate]:
        """Run *query* and return candidates in provider rank order.

        Raises:
            UpstreamSearchError: On non-2xx responses, an ``error`` field in
                the payload, or when the provider cannot be reached.
        """
        logger.info(f"{self.name} search for: {query!r}")
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout_seconds, transport=self._transport
            ) as client:
                response = await client.get(
                    self.endpoint,
                    params=self._params(query),
                    headers=self._headers(),
                )
        except httpx.HTTPError as e:
            logger.error(f"{self.name} request failed: {type(e).__name__}: {e}")
            raise UpstreamSearchError(
                "Search provider unreachable",
                status_code=502,
                details=type(e).__name__,
            ) from e

        if not response.is_success:
            logger.error(
                f"{self.name} error: {response.status_code} {response.text[:500]}"
            )
            raise UpstreamSearchError(
                f"Search provider fetch error: {response.reason_phrase}",
                status_code=response.status_code,
                details=response.text,
            )

        try:
            data = response.json()
        except ValueError as e:
            logger.error(f"{self.name} returned invalid JSON: {e}")
            raise UpstreamSearchError(
                "Search provider returned invalid JSON",
                status_code=502,
                details=response.text[:1000],
            ) from e

        if isinstance(data, dict) and data.get("error"):
            logger.error(f"{self.name} application error: {data['error']}")
            raise UpstreamSearchError(
                "Search provider application error",
                status_code=400,
                details=data["error"],
            )

        items = self._results(data if isinstance(data, dict) else {})
        candidates = [
            self._to_candidate(rank, item)
            for rank, item in enumerate(i for i in items if isinstance(i, dict))
        ]
        logger.info(f"{self.name} returned {len(candidates)} results")
        return candidates

    # ------------------------------------------------------------------
    # Hooks for subclasses
    # ------------------------------------------------------------------

    def _params(self, query: str) -> dict[str, Any]:
        raise NotImplementedError

    def _headers(self) -> dict[str, str]:
        return {"Accept": "application/json"}

    def _results(self, data: dict[str, Any]) -> list[Any]:
        raise NotImplementedError

    def _to_candidate(self, rank: int, item: dict[str, Any]) -> SearchCandidate:
        raise NotImplementedError


class BraveSearchProvider(_HttpSearchProvider):
    """Brave Search web API (``X-Subscription-Token`` auth)."""

    name = "brave"
    endpoint = "https://api.search.brave.com/res/v1/web/search"

    def _params(self, query: str) -> dict[str, Any]:
        return {"q": query, "count": self.result_count}

    def _headers(self) -> dict[str, str]:
        return {**super()._headers(), "X-Subscription-Token": self.api_key}

    def _results(self, data: dict[str, Any]) -> list[Any]:
        return (data.get("web") or {}).get("results") or []

    def _to_candidate(self, rank: int, item: dict[str, Any]) -> SearchCandidate:
        return SearchCandidate(
            rank=rank,
            title=item.get("title") or "",
            url=item.get("url") or None,
            snippet=item.get("description") or "",
        )


class SerpApiProvider(_HttpSearchProvider):
    """SerpAPI Google engine (``api_key`` query parameter)."""

    name = "serpapi"
    endpoint = "https://serpapi.com/search.json"

    def _params(self, query: str) -> dict[str, Any]:
        return {
            "engine": "google",
            "q": query,
            "num": self.result_count,
            "api_key": self.api_key,
        }

    def _results(self, data: dict[str, Any]) -> list[Any]:
        return data.get("organic_results") or []

    def _to_candidate(self, rank: int, item: dict[str, Any]) -> SearchCandidate:
        return SearchCandidate(
            rank=rank,
            title=item.get("title") or "",
            url=item.get("link") or None,
            snippet=item.get("snippet") or "",
        )


_PROVIDERS: dict[str, type[_HttpSearchProvider]] = {
    BraveSearchProvider.name: BraveSearchProvider,
    SerpApiProvider.name: SerpApiProvider,
}


def build_search_provider(settings: Settings) -> Optional[_HttpSearchProvider]:
    """Create the configured provider, or ``None`` when no API key is set.

    Raises:
        ValueError: If ``search_provider`` names an unknown provider.
    """
    if not settings.search_api_key:
        return None

    name = settings.search_provider.strip().lower()
    provider_cls = _PROVIDERS.get(name)
    if provider_cls is None:
        raise ValueError(f"Unsupported search provider: {settings.search_provider}")

    return provider_cls(
        settings.search_api_key,
        result_count=settings.search_result_count,
        timeout_seconds=settings.search_timeout_seconds,
    )
