"""Domain entities — pure data structures with no external dependencies."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping


@dataclass(frozen=True, slots=True)
class License:
    """License descriptor as reported by GitHub."""

    key: str
    name: str
    spdx_id: str | None = None


@dataclass(frozen=True, slots=True)
class RepoInfo:
    """Core repository attributes, taken verbatim from the API."""

    name: str
    html_url: str
    stargazers_count: int
    forks_count: int
    created_at: str
    updated_at: str
    default_branch: str
    description: str | None = None
    license: License | None = None
    topics: tuple[str, ...] = ()
    visibility: str = ""


@dataclass(frozen=True, slots=True)
class RepoStats:
    """Derived statistics; every field falls back to 0."""

    open_issues_count: int = 0
    watchers_count: int = 0
    network_count: int = 0
    size: int = 0  # kilobytes


@dataclass(frozen=True, slots=True)
class RateLimitStatus:
    """Remaining quota and the epoch second at which it resets."""

    remaining: int
    reset: int


@dataclass(frozen=True, slots=True)
class RepositorySummary:
    """The final structured output returned to the caller."""

    repo: RepoInfo
    stats: RepoStats
    languages: Mapping[str, int] = field(default_factory=dict)
    content: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Read-only views over private copies.
        object.__setattr__(self, "languages", MappingProxyType(dict(self.languages)))
        object.__setattr__(self, "content", MappingProxyType(dict(self.content)))

    def to_dict(self) -> dict[str, Any]:
        """Nested plain-data form suitable for JSON or YAML serializers."""
        info = self.repo
        return {
            "repo": {
                "name": info.name,
                "description": info.description,
                "html_url": info.html_url,
                "stargazers_count": info.stargazers_count,
                "forks_count": info.forks_count,
                "created_at": info.created_at,
                "updated_at": info.updated_at,
                "default_branch": info.default_branch,
                "license": (
                    {
                        "key": info.license.key,
                        "name": info.license.name,
                        "spdx_id": info.license.spdx_id,
                    }
                    if info.license
                    else None
                ),
                "topics": list(info.topics),
                "visibility": info.visibility,
            },
            "stats": {
                "open_issues_count": self.stats.open_issues_count,
                "watchers_count": self.stats.watchers_count,
                "network_count": self.stats.network_count,
                "size": self.stats.size,
            },
            "languages": dict(self.languages),
            "content": dict(self.content),
        }
