"""Fetch well-known root files, keeping only those that exist as text."""

from __future__ import annotations

import asyncio
import logging
from typing import Iterable, Sequence

from gh_analyzer.domain.exceptions import ContentDecodeError, InvalidFilenameError
from gh_analyzer.domain.ports.repo_fetcher import RepoFetcher
from gh_analyzer.domain.value_objects import RepoPath

logger = logging.getLogger(__name__)

DEFAULT_CANDIDATE_FILES: tuple[str, ...] = (
    "README.md",
    "CONTRIBUTING.md",
    "LICENSE",
    "setup.py",
    "requirements.txt",
    "Cargo.toml",
    "package.json",
    "go.mod",
    "composer.json",
    "Gemfile",
)


def validate_filename(name: str) -> str:
    """Return *name* if it is a relative path with no dot segments."""
    segments = name.split("/")
    if name.startswith("/") or any(seg in ("", ".", "..") for seg in segments):
        raise InvalidFilenameError(f"Invalid filename: '{name}'")
    return name


def candidate_files(extra: Iterable[str] = ()) -> list[str]:
    """Default candidates followed by *extra*, de-duplicated, order kept.

    Raises :class:`InvalidFilenameError` for names that would escape the
    contents endpoint.
    """
    seen: dict[str, None] = {}
    for name in (*DEFAULT_CANDIDATE_FILES, *extra):
        name = name.strip()
        if name:
            seen.setdefault(validate_filename(name), None)
    return list(seen)


async def collect_files(
    fetcher: RepoFetcher,
    path: RepoPath,
    filenames: Sequence[str],
    *,
    max_concurrency: int = 5,
    tolerate_undecodable: bool = False,
) -> dict[str, str]:
    """Fetch *filenames* concurrently and return those that were found.

    Missing files and non-file entries are simply left out.  Any other
    failure aborts the whole collection; outstanding fetches are cancelled.
    With *tolerate_undecodable*, content that is not valid base64 UTF-8 is
    treated as absent instead.
    """
    sem = asyncio.Semaphore(max(1, max_concurrency))

    async def _fetch_one(filename: str) -> str | None:
        async with sem:
            try:
                return await fetcher.fetch_file_content(path, filename)
            except ContentDecodeError:
                if not tolerate_undecodable:
                    raise
                logger.debug("Undecodable content in %s — skipping", filename, exc_info=True)
                return None

    tasks = [asyncio.ensure_future(_fetch_one(name)) for name in filenames]
    try:
        results = await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise

    contents = {
        name: text for name, text in zip(filenames, results) if text is not None
    }
    logger.info(
        "Found %d of %d candidate files in %s", len(contents), len(filenames), path
    )
    return contents
