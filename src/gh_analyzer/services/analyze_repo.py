"""Analyze-repository use case — the main orchestration pipeline.

This is the single entry point for the business logic.  It depends only on
the ports (:class:`RepoFetcher` and :class:`ProgressObserver`) and the pure
service modules.  The interface layer injects concrete adapters at runtime.

Pipeline order is fixed: quota check → metadata → languages → files.  A
missing repository therefore short-circuits before any further calls are
spent against the rate limit.
"""

from __future__ import annotations

import logging
from typing import Iterable

from gh_analyzer.domain.entities import RepoInfo, RepositorySummary, RepoStats
from gh_analyzer.domain.ports.progress import NullProgress, ProgressObserver
from gh_analyzer.domain.ports.repo_fetcher import RepoFetcher
from gh_analyzer.domain.value_objects import RepoPath
from gh_analyzer.services.file_collector import candidate_files, collect_files
from gh_analyzer.services.rate_limit_guard import RateLimitGuard
from gh_analyzer.services.summary_assembler import assemble_summary

logger = logging.getLogger(__name__)


class AnalyzeRepoUseCase:
    """Orchestrates the full repo → summary pipeline.

    Parameters
    ----------
    repo_fetcher:
        Adapter that can query quota, metadata, languages and file contents.
    progress:
        Observer notified at each phase; defaults to a no-op.
    extra_files:
        Filenames fetched in addition to the default candidates on every run.
    max_concurrent_fetches:
        Upper bound on simultaneous file-content requests.
    tolerate_undecodable_files:
        Treat files whose content cannot be decoded as absent rather than
        failing the run.
    """

    def __init__(
        self,
        repo_fetcher: RepoFetcher,
        progress: ProgressObserver | None = None,
        extra_files: Iterable[str] = (),
        max_concurrent_fetches: int = 5,
        tolerate_undecodable_files: bool = False,
    ) -> None:
        self._fetcher = repo_fetcher
        self._progress = progress or NullProgress()
        self._guard = RateLimitGuard(repo_fetcher)
        self._extra_files = tuple(extra_files)
        self._max_concurrency = max_concurrent_fetches
        self._tolerate_undecodable = tolerate_undecodable_files

    # ── Public entry point ──────────────────────────────────────────────

    async def execute(
        self, repo: str | RepoPath, extra_files: Iterable[str] = ()
    ) -> RepositorySummary:
        """Run the full pipeline and return the assembled summary."""
        path = repo if isinstance(repo, RepoPath) else RepoPath.from_string(repo)
        filenames = candidate_files((*self._extra_files, *extra_files))
        logger.info("Analysing %s", path)

        info, stats, languages = await self.fetch_repository(path)

        self._progress.phase("Fetching repository contents...")
        content = await self._collect(path, filenames)

        self._progress.finished("Analysis complete!")
        return assemble_summary(info, stats, languages, content)

    # ── Stages ──────────────────────────────────────────────────────────

    async def fetch_repository(
        self, path: RepoPath
    ) -> tuple[RepoInfo, RepoStats, dict[str, int]]:
        """Quota check, then metadata, then language statistics."""
        self._progress.phase("Fetching repository info...")
        await self._guard.ensure_quota()
        info, stats = await self._fetcher.fetch_repository(path)

        self._progress.phase("Fetching language statistics...")
        languages = await self._fetcher.fetch_languages(path)
        return info, stats, languages

    async def fetch_files(
        self, path: RepoPath, extra_files: Iterable[str] = ()
    ) -> dict[str, str]:
        """Best-effort retrieval of the candidate files."""
        return await self._collect(path, candidate_files(extra_files))

    async def _collect(self, path: RepoPath, filenames: list[str]) -> dict[str, str]:
        return await collect_files(
            self._fetcher,
            path,
            filenames,
            max_concurrency=self._max_concurrency,
            tolerate_undecodable=self._tolerate_undecodable,
        )
