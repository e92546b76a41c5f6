"""Pydantic request / response DTOs for the API boundary."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from gh_analyzer.domain.entities import RepositorySummary


class AnalyzeRequest(BaseModel):
    """Request body for ``POST /analyze``."""

    repo: str
    extra_files: list[str] = Field(default_factory=list)

    @field_validator("repo")
    @classmethod
    def _must_not_be_empty(cls, v: str) -> str:
        stripped = v.strip()
        if not stripped:
            msg = "repo must not be empty."
            raise ValueError(msg)
        return stripped


class LicenseSchema(BaseModel):
    key: str
    name: str
    spdx_id: str | None = None


class RepoInfoSchema(BaseModel):
    name: str
    description: str | None = None
    html_url: str
    stargazers_count: int
    forks_count: int
    created_at: str
    updated_at: str
    default_branch: str
    license: LicenseSchema | None = None
    topics: list[str] = Field(default_factory=list)
    visibility: str = ""


class RepoStatsSchema(BaseModel):
    open_issues_count: int = 0
    watchers_count: int = 0
    network_count: int = 0
    size: int = 0


class AnalyzeResponse(BaseModel):
    """Successful response from ``POST /analyze``."""

    repo: RepoInfoSchema
    stats: RepoStatsSchema
    languages: dict[str, int]
    content: dict[str, str]

    @classmethod
    def from_summary(cls, summary: RepositorySummary) -> AnalyzeResponse:
        return cls.model_validate(summary.to_dict())


class ErrorResponse(BaseModel):
    """Standard error envelope returned on all failure paths."""

    status: str = "error"
    message: str
