"""Run one query through the pipeline and print what came back.

Usage:
    python scripts/try_query.py "tide pools"
    python scripts/try_query.py "url:https://en.wikipedia.org/wiki/Tide_pool"

Reads SEARCH_API_KEY etc. from backend/.env (search mode only).
"""

import asyncio
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from app.models.web_search import DirectFetchResponse  # noqa: E402
from app.services.web_search import WebSearchError, build_query_router  # noqa: E402


def _print_excerpt(content: str | None, width: int = 300) -> None:
    if content:
        excerpt = content[:width].replace("\n", " ")
        print(f"   {excerpt}{'...' if len(content) > width else ''}")


async def try_query(raw_query: str) -> None:
    router = build_query_router()
    print(f"Query: {raw_query!r}")

    start = time.perf_counter()
    try:
        response = await router.handle(raw_query)
    except WebSearchError as e:
        print(f"❌ {type(e).__name__} ({e.status_code}): {e.message}")
        if e.details:
            print(f"   details: {e.details}")
        return
    elapsed = time.perf_counter() - start

    if isinstance(response, DirectFetchResponse):
        print(f"✅ {response.extracted_content_status.value}: {response.title}")
        print(f"   {response.extracted_content_status_detail}")
        _print_excerpt(response.extracted_content)
    else:
        print(f"✅ {len(response.organic_results)} results from {response.provider}")
        for result in response.organic_results:
            print(f"\n[{result.rank}] {result.title}")
            print(f"   {result.url}")
            print(f"   {result.extracted_content_status.value}: "
                  f"{result.extracted_content_status_detail}")
            _print_excerpt(result.extracted_content)

    print(f"\nFinished in {elapsed:.2f}s")


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print(__doc__)
        sys.exit(1)
    asyncio.run(try_query(" ".join(sys.argv[1:])))
