"""Readable Search Backend - FastAPI Application Entry Point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import get_settings
from app.routers import search
from app.services.web_search import InternalError, WebSearchError

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log startup configuration and shutdown."""
    logger.info("Starting Readable Search Backend...")
    if not settings.search_api_key:
        logger.warning("SEARCH_API_KEY not set: only url: queries will work")
    else:
        logger.info(f"Search provider: {settings.search_provider}")

    yield

    logger.info("Readable Search Backend shutdown complete")


app = FastAPI(
    title="Readable Search Backend",
    description="Web search with bounded, LLM-ready page text extraction",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS for browser clients
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)

# Include routers
app.include_router(search.router)


@app.exception_handler(WebSearchError)
async def web_search_exception_handler(
    request: Request, exc: WebSearchError
) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{type(exc).__name__}: {exc.message}")
    else:
        logger.warning(f"{type(exc).__name__}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled exception: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=InternalError().to_dict(),
    )


@app.get("/health")
async def health_check() -> dict:
    """
    Health check endpoint for monitoring.

    Reports whether search mode is available; ``url:`` queries work
    without a search API key.
    """
    current = get_settings()
    return {
        "status": "healthy" if current.search_api_key else "degraded",
        "search_provider": current.search_provider,
        "search_configured": bool(current.search_api_key),
    }
