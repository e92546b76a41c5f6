"""Summary assembler — combines fetched pieces into one immutable result."""

from __future__ import annotations

from typing import Mapping

from gh_analyzer.domain.entities import RepoInfo, RepositorySummary, RepoStats


def assemble_summary(
    info: RepoInfo,
    stats: RepoStats,
    languages: Mapping[str, int],
    content: Mapping[str, str],
) -> RepositorySummary:
    """Build the :class:`RepositorySummary`; the inputs are copied."""
    return RepositorySummary(
        repo=info,
        stats=stats,
        languages=dict(languages),
        content=dict(content),
    )
