"""Tests for the rate-limit guard."""

import asyncio
from datetime import datetime

import pytest

from gh_analyzer.domain.entities import RateLimitStatus
from gh_analyzer.domain.exceptions import RateLimitExceededError
from gh_analyzer.services.rate_limit_guard import RateLimitGuard, format_reset_time


class FakeFetcher:
    def __init__(self, status):
        self.status = status
        self.calls = 0

    async def check_rate_limit(self):
        self.calls += 1
        return self.status


def test_format_reset_time_is_local_clock():
    assert format_reset_time(1_700_000_000) == datetime.fromtimestamp(1_700_000_000).strftime(
        "%H:%M:%S"
    )


def test_format_reset_time_out_of_range():
    assert format_reset_time(10**20) == str(10**20)


def test_quota_available():
    fetcher = FakeFetcher(RateLimitStatus(remaining=1, reset=0))
    status = asyncio.run(RateLimitGuard(fetcher).ensure_quota())
    assert status.remaining == 1
    assert fetcher.calls == 1


def test_quota_exhausted():
    fetcher = FakeFetcher(RateLimitStatus(remaining=0, reset=1_700_000_000))
    with pytest.raises(RateLimitExceededError) as info:
        asyncio.run(RateLimitGuard(fetcher).ensure_quota())
    assert str(info.value).startswith("API rate limit exceeded. Resets at ")
    assert info.value.reset_time == format_reset_time(1_700_000_000)
    assert fetcher.calls == 1
