"""Tests for app.services.web_search.text_utils."""

import pytest

from app.services.web_search.text_utils import host_matches, is_http_url, truncate_text


class TestTruncateText:
    def test_exact_limit_has_no_ellipsis(self):
        text = "a" * 4000
        assert truncate_text(text, 4000) == text

    def test_one_over_limit_is_cut_and_suffixed(self):
        result = truncate_text("a" * 4001, 4000)
        assert result == "a" * 4000 + "..."
        assert len(result) == 4003

    def test_counts_characters_not_bytes(self):
        """Multi-byte characters count once each."""
        text = "é" * 250
        assert truncate_text(text, 250) == text

    def test_short_text_unchanged(self):
        assert truncate_text("hello", 250) == "hello"


class TestIsHttpUrl:
    @pytest.mark.parametrize(
        "url",
        ["https://example.com", "http://example.com/a?b=c", "HTTPS://Example.com/"],
    )
    def test_valid(self, url):
        assert is_http_url(url) is True

    @pytest.mark.parametrize(
        "url",
        [
            "",
            None,
            "not-a-url",
            "ftp://example.com",
            "https://",
            "example.com/page",
            "http://:80",
            "http://user@",
            "https:// /x",
        ],
    )
    def test_invalid(self, url):
        assert is_http_url(url) is False


class TestHostMatches:
    def test_exact_domain(self):
        assert host_matches("https://linkedin.com/in/jane", ["linkedin.com"]) == "linkedin.com"

    def test_subdomain(self):
        assert (
            host_matches("https://www.linkedin.com/in/jane", ["linkedin.com"])
            == "linkedin.com"
        )

    def test_lookalike_domain_not_matched(self):
        assert host_matches("https://notlinkedin.com/in/jane", ["linkedin.com"]) is None

    def test_case_insensitive(self):
        assert host_matches("https://WWW.LinkedIn.COM/", ["linkedin.com"]) == "linkedin.com"
