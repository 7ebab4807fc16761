"""Tests for app.models.web_search."""

import pytest
from pydantic import ValidationError

from app.models.web_search import (
    AnnotatedResult,
    ExtractionOutcome,
    ExtractionStatus,
    SearchCandidate,
)


def _make_candidate(title: str = "Provider Title") -> SearchCandidate:
    return SearchCandidate(
        rank=0, title=title, url="https://example.com/a", snippet="snippet"
    )


class TestExtractionOutcome:
    def test_success_requires_content(self):
        with pytest.raises(ValidationError):
            ExtractionOutcome(status=ExtractionStatus.SUCCESS, status_detail="ok")

    @pytest.mark.parametrize(
        "status",
        [
            ExtractionStatus.FETCH_FAILED,
            ExtractionStatus.PARSE_EMPTY,
            ExtractionStatus.TRANSPORT_ERROR,
            ExtractionStatus.SKIPPED,
        ],
    )
    def test_failure_rejects_content(self, status):
        with pytest.raises(ValidationError):
            ExtractionOutcome(status=status, status_detail="no", content="text")

    def test_outcome_is_immutable(self):
        outcome = ExtractionOutcome(
            status=ExtractionStatus.SKIPPED, status_detail="skipped"
        )
        with pytest.raises(ValidationError):
            outcome.status_detail = "changed"


class TestAnnotatedResultMerge:
    def test_extracted_title_replaces_different_title(self):
        outcome = ExtractionOutcome(
            status=ExtractionStatus.SUCCESS,
            status_detail="ok",
            title="Page Title",
            content="body",
        )
        result = AnnotatedResult.merge(_make_candidate(), outcome)
        assert result.title == "Page Title"
        assert result.extracted_content == "body"
        assert result.extracted_content_status == ExtractionStatus.SUCCESS

    def test_missing_extracted_title_keeps_candidate_title(self):
        outcome = ExtractionOutcome(
            status=ExtractionStatus.PARSE_EMPTY, status_detail="empty", title=None
        )
        result = AnnotatedResult.merge(_make_candidate(), outcome)
        assert result.title == "Provider Title"
        assert result.extracted_content is None

    def test_candidate_fields_carried_over(self):
        outcome = ExtractionOutcome(
            status=ExtractionStatus.SKIPPED, status_detail="skipped"
        )
        candidate = _make_candidate()
        result = AnnotatedResult.merge(candidate, outcome)
        assert result.rank == candidate.rank
        assert result.url == candidate.url
        assert result.snippet == candidate.snippet
        assert result.extracted_content_status_detail == "skipped"
