"""Named constants for the web search package.

Centralizes limits, request headers, and the status messages returned to
callers so they can be tuned from one place.
"""

# ---------------------------------------------------------------------------
# Limits
# ---------------------------------------------------------------------------
DEFAULT_EXTRACTION_TIMEOUT_MS = 8_000  # Per-page fetch deadline
DEFAULT_MAX_PROCESSED = 2  # Results sent through extraction per query
MAX_CONTENT_CHARS = 4_000  # Characters of article text kept per page
SNIPPET_CHARS = 250  # Characters of content echoed as a direct-fetch snippet
ELLIPSIS = "..."
NOT_AVAILABLE = "N/A"

# ---------------------------------------------------------------------------
# Request headers (many sites reject requests without these)
# ---------------------------------------------------------------------------
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36"
)
ACCEPT_HEADER = "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8"
ACCEPT_LANGUAGE_HEADER = "en-US,en;q=0.5"

# ---------------------------------------------------------------------------
# Access-restricted domains (login-walled, never fetched)
# ---------------------------------------------------------------------------
DEFAULT_RESTRICTED_DOMAINS: tuple[str, ...] = ("linkedin.com",)

# ---------------------------------------------------------------------------
# Status details
# ---------------------------------------------------------------------------
STATUS_SUCCESS = "Content extracted successfully."
STATUS_FETCH_FAILED = (
    "Failed to fetch content (Status: {status_code}). "
    "It might be protected, private, or a login page."
)
STATUS_PARSE_EMPTY = (
    "Readable content not found or page structure not suitable for extraction."
)
STATUS_TRANSPORT_ERROR = (
    "Error during content extraction: {error_name}. "
    "The site might be blocking automated access."
)
STATUS_NO_LINK = "No link provided in search result."
STATUS_UNSUPPORTED_LINK = "Unsupported link: only http(s) URLs can be extracted."
STATUS_RESTRICTED = (
    "Direct extraction skipped: {domain} requires authentication, "
    "so its pages cannot be read without logging in."
)
STATUS_OVER_LIMIT = (
    "Not processed: outside the extraction limit of {limit} results."
)
