"""Port: repository fetcher — defined by the domain, implemented by infrastructure."""

from __future__ import annotations

from typing import Protocol

from gh_analyzer.domain.entities import RateLimitStatus, RepoInfo, RepoStats
from gh_analyzer.domain.value_objects import RepoPath


class RepoFetcher(Protocol):
    """Abstract contract for fetching GitHub repository data."""

    async def check_rate_limit(self) -> RateLimitStatus:
        """Return the caller's current API quota."""
        ...

    async def fetch_repository(self, path: RepoPath) -> tuple[RepoInfo, RepoStats]:
        """Return core attributes and derived statistics of the repository."""
        ...

    async def fetch_languages(self, path: RepoPath) -> dict[str, int]:
        """Return language → byte-count mapping from the GitHub Languages API."""
        ...

    async def fetch_file_content(self, path: RepoPath, filename: str) -> str | None:
        """Return the decoded text of a root-level file, or ``None`` if absent."""
        ...
