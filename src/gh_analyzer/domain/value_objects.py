"""Value objects — self-validating domain primitives."""

from __future__ import annotations

import re
from dataclasses import dataclass

from gh_analyzer.domain.exceptions import InvalidRepoPathError

_SLUG_RE = re.compile(r"^(?P<owner>[A-Za-z0-9\-_.]+)/(?P<repo>[A-Za-z0-9\-_.]+)$")
_GITHUB_URL_RE = re.compile(
    r"^https?://github\.com/(?P<owner>[A-Za-z0-9\-_.]+)/(?P<repo>[A-Za-z0-9\-_.]+?)(?:\.git)?/?$"
)


@dataclass(frozen=True, slots=True)
class RepoPath:
    """Validated ``owner/name`` repository reference.

    Accepts either the bare slug (``psf/requests``) or a GitHub URL
    (``https://github.com/psf/requests``).  Anything else is rejected.
    """

    owner: str
    repo: str

    @classmethod
    def from_string(cls, value: str) -> RepoPath:
        """Parse and validate a raw repository reference."""
        value = value.strip()
        match = _SLUG_RE.match(value) or _GITHUB_URL_RE.match(value)
        if not match or match["owner"] in (".", "..") or match["repo"] in (".", ".."):
            raise InvalidRepoPathError(
                f"Invalid repository: '{value}'. Expected format: owner/name"
            )
        return cls(owner=match["owner"], repo=match["repo"])

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"

    def __str__(self) -> str:
        return self.full_name
