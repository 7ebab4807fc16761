"""Concurrent extraction over a ranked list of search candidates.

Only the first ``max_processed`` candidates are fetched; all fetches run at
once so the step costs one page timeout, not the sum of them. Every input
candidate comes back exactly once, in its original position.
"""

import asyncio
import logging
from typing import Optional, Protocol, Sequence

from app.models.web_search import (
    AnnotatedResult,
    ExtractionOutcome,
    ExtractionStatus,
    SearchCandidate,
)
from app.services.web_search.constants import (
    DEFAULT_MAX_PROCESSED,
    DEFAULT_RESTRICTED_DOMAINS,
    STATUS_NO_LINK,
    STATUS_OVER_LIMIT,
    STATUS_RESTRICTED,
    STATUS_TRANSPORT_ERROR,
    STATUS_UNSUPPORTED_LINK,
)
from app.services.web_search.text_utils import host_matches, is_http_url

logger = logging.getLogger(__name__)


class Extractor(Protocol):
    async def extract(
        self, url: str, timeout_ms: Optional[int] = None
    ) -> ExtractionOutcome: ...


def _skipped(detail: str) -> ExtractionOutcome:
    return ExtractionOutcome(status=ExtractionStatus.SKIPPED, status_detail=detail)


class ResultAggregator:
    """Runs a ``PageExtractor`` over search candidates and merges the outcomes."""

    def __init__(
        self,
        extractor: Extractor,
        *,
        max_processed: int = DEFAULT_MAX_PROCESSED,
        restricted_domains: Sequence[str] = DEFAULT_RESTRICTED_DOMAINS,
        timeout_ms: Optional[int] = None,
    ) -> None:
        self.extractor = extractor
        self.max_processed = max_processed
        self.restricted_domains = tuple(restricted_domains)
        self.timeout_ms = timeout_ms

    def skip_reason(
        self, candidate: SearchCandidate, position: int, limit: int
    ) -> Optional[str]:
        """Why *candidate* will not be fetched, or ``None`` if it will be.

        Missing links and restricted domains are checked before the limit, so
        they are reported the same way wherever they sit in the list.
        """
        if not candidate.url:
            return STATUS_NO_LINK

        domain = host_matches(candidate.url, self.restricted_domains)
        if domain:
            return STATUS_RESTRICTED.format(domain=domain)

        if position >= limit:
            return STATUS_OVER_LIMIT.format(limit=limit)

        if not is_http_url(candidate.url):
            return STATUS_UNSUPPORTED_LINK

        return None

    async def aggregate(
        self,
        candidates: Sequence[SearchCandidate],
        max_processed: Optional[int] = None,
    ) -> list[AnnotatedResult]:
        """Annotate every candidate with an extraction outcome.

        Args:
            candidates: Provider results in rank order.
            max_processed: Number of leading positions eligible for
                extraction; defaults to the aggregator's setting.

        Returns:
            One ``AnnotatedResult`` per candidate, in input order.
        """
        limit = self.max_processed if max_processed is None else max_processed
        outcomes: list[Optional[ExtractionOutcome]] = [None] * len(candidates)

        pending: list[int] = []
        for index, candidate in enumerate(candidates):
            reason = self.skip_reason(candidate, index, limit)
            if reason is None:
                pending.append(index)
            else:
                outcomes[index] = _skipped(reason)

        logger.info(
            f"Extracting {len(pending)} of {len(candidates)} results concurrently"
        )

        results = await asyncio.gather(
            *(self._extract_one(candidates[i]) for i in pending),
            return_exceptions=True,
        )

        # Re-associate by index; completion order is irrelevant
        for index, result in zip(pending, results):
            if isinstance(result, BaseException):
                if not isinstance(result, Exception):
                    raise result
                logger.error(
                    f"Unexpected extraction failure for {candidates[index].url}: "
                    f"{type(result).__name__}: {result}"
                )
                result = ExtractionOutcome(
                    status=ExtractionStatus.TRANSPORT_ERROR,
                    status_detail=STATUS_TRANSPORT_ERROR.format(
                        error_name=type(result).__name__
                    ),
                )
            outcomes[index] = result

        return [
            AnnotatedResult.merge(candidate, outcome)
            for candidate, outcome in zip(candidates, outcomes)
        ]

    async def _extract_one(self, candidate: SearchCandidate) -> ExtractionOutcome:
        return await self.extractor.extract(candidate.url, self.timeout_ms)
