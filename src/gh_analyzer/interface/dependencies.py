"""FastAPI dependency injection wiring."""

from __future__ import annotations

import httpx

from gh_analyzer.infrastructure.config import get_settings
from gh_analyzer.infrastructure.github_rest_adapter import GitHubRestAdapter
from gh_analyzer.infrastructure.http_client import build_client
from gh_analyzer.infrastructure.logging_progress import LoggingProgressReporter
from gh_analyzer.services.analyze_repo import AnalyzeRepoUseCase

_http_client: httpx.AsyncClient | None = None


async def startup() -> None:
    """Initialise shared resources — called from the lifespan context manager."""
    global _http_client  # noqa: PLW0603

    settings = get_settings()
    token = settings.github_token.get_secret_value() if settings.github_token else None
    _http_client = build_client(
        token,
        base_url=settings.github_api_url,
        timeout=settings.request_timeout,
    )


async def shutdown() -> None:
    """Release shared resources."""
    global _http_client  # noqa: PLW0603

    if _http_client:
        await _http_client.aclose()
        _http_client = None


def get_use_case() -> AnalyzeRepoUseCase:
    """Build a use case around the shared client."""
    settings = get_settings()

    assert _http_client is not None, "startup() was not called"

    return AnalyzeRepoUseCase(
        repo_fetcher=GitHubRestAdapter(client=_http_client),
        progress=LoggingProgressReporter(),
        extra_files=settings.extra_files,
        max_concurrent_fetches=settings.max_concurrent_fetches,
        tolerate_undecodable_files=settings.tolerate_undecodable_files,
    )
