"""Text helpers shared by the extraction pipeline."""

from typing import Sequence
from urllib.parse import urlparse

from app.services.web_search.constants import ELLIPSIS


def truncate_text(text: str, limit: int) -> str:
    """Return the first *limit* characters of *text*, ellipsis-suffixed if cut.

    Counts characters, not bytes. Text of exactly *limit* characters is
    returned unchanged.
    """
    if len(text) <= limit:
        return text
    return text[:limit] + ELLIPSIS


def is_http_url(url: str | None) -> bool:
    """True for absolute ``http``/``https`` URLs with a host."""
    if not url:
        return False
    try:
        parsed = urlparse(url)
    except ValueError:
        return False
    if parsed.scheme.lower() not in ("http", "https"):
        return False
    host = parsed.hostname
    return bool(host) and not any(ch.isspace() for ch in host)


def host_matches(url: str, domains: Sequence[str]) -> str | None:
    """Return the entry of *domains* that *url*'s host equals or sits under."""
    try:
        host = (urlparse(url).hostname or "").lower()
    except ValueError:
        return None
    for domain in domains:
        domain = domain.lower().lstrip(".")
        if host == domain or host.endswith(f".{domain}"):
            return domain
    return None
