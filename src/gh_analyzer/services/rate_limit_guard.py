"""Rate-limit guard — refuses to start an analysis with no quota left."""

from __future__ import annotations

import logging
from datetime import datetime

from gh_analyzer.domain.entities import RateLimitStatus
from gh_analyzer.domain.exceptions import RateLimitExceededError
from gh_analyzer.domain.ports.repo_fetcher import RepoFetcher

logger = logging.getLogger(__name__)


def format_reset_time(reset: int) -> str:
    """Render an epoch-seconds instant as local wall-clock ``HH:MM:SS``."""
    try:
        return datetime.fromtimestamp(reset).strftime("%H:%M:%S")
    except (OverflowError, OSError, ValueError):
        return str(reset)


class RateLimitGuard:
    """Checks the API quota once; a hard stop, never a backoff loop."""

    def __init__(self, fetcher: RepoFetcher) -> None:
        self._fetcher = fetcher

    async def ensure_quota(self) -> RateLimitStatus:
        """Return the current quota, or raise if nothing remains."""
        status = await self._fetcher.check_rate_limit()
        if status.remaining == 0:
            reset_time = format_reset_time(status.reset)
            logger.warning("GitHub API quota exhausted until %s", reset_time)
            raise RateLimitExceededError(status.reset, reset_time)
        return status
