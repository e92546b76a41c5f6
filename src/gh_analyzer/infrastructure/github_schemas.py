"""Pydantic models for GitHub REST payloads (anti-corruption layer)."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, RootModel

from gh_analyzer.domain.entities import License, RepoInfo, RepoStats


class LicensePayload(BaseModel):
    model_config = ConfigDict(strict=True, extra="ignore")

    key: str
    name: str
    spdx_id: str | None = None


class RepoPayload(BaseModel):
    """Strict view of ``GET /repos/{owner}/{repo}``."""

    model_config = ConfigDict(strict=True, extra="ignore")

    name: str
    description: str | None = None
    html_url: str
    stargazers_count: NonNegativeInt
    forks_count: NonNegativeInt
    created_at: str
    updated_at: str
    default_branch: str
    license: LicensePayload | None = None
    topics: list[str] = Field(default_factory=list)
    visibility: str = ""

    def to_entity(self) -> RepoInfo:
        return RepoInfo(
            name=self.name,
            description=self.description,
            html_url=self.html_url,
            stargazers_count=self.stargazers_count,
            forks_count=self.forks_count,
            created_at=self.created_at,
            updated_at=self.updated_at,
            default_branch=self.default_branch,
            license=(
                License(
                    key=self.license.key,
                    name=self.license.name,
                    spdx_id=self.license.spdx_id,
                )
                if self.license
                else None
            ),
            topics=tuple(self.topics),
            visibility=self.visibility,
        )


class LanguagesPayload(RootModel[dict[str, NonNegativeInt]]):
    """Flat ``{language: bytes}`` map from ``/languages``."""

    model_config = ConfigDict(strict=True)


class ContentEnvelope(BaseModel):
    """A single tree entry from ``/contents/{path}``."""

    model_config = ConfigDict(extra="ignore")

    type: str
    content: str | None = None
    encoding: str | None = None


def coerce_count(value: Any) -> int:
    """Return *value* if it is a non-negative JSON integer, else 0."""
    if isinstance(value, bool) or not isinstance(value, int):
        return 0
    return value if value >= 0 else 0


def parse_stats(data: dict[str, Any]) -> RepoStats:
    """Pull the four stat fields out of a repository body, tolerating gaps."""
    return RepoStats(
        open_issues_count=coerce_count(data.get("open_issues_count")),
        watchers_count=coerce_count(data.get("watchers_count")),
        network_count=coerce_count(data.get("network_count")),
        size=coerce_count(data.get("size")),
    )


def parse_rate_limit(data: Any) -> tuple[int, int]:
    """Extract ``(remaining, reset)`` from ``{rate: {remaining, reset}}``."""
    rate = data.get("rate") if isinstance(data, dict) else None
    if not isinstance(rate, dict):
        return 0, 0
    return coerce_count(rate.get("remaining")), coerce_count(rate.get("reset"))
