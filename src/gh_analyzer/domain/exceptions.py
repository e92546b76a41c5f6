"""Domain exception hierarchy.

Each exception maps to a specific HTTP status code at the interface layer.
Inner layers raise these; the outermost error-handler translates them.
"""

from __future__ import annotations


class GhAnalyzerError(Exception):
    """Base exception for the entire application."""


# ── Input validation ────────────────────────────────────────────────────────


class InvalidRepoPathError(GhAnalyzerError):
    """The supplied repository reference is not ``owner/name``."""


class InvalidFilenameError(GhAnalyzerError):
    """A requested filename is not a plain path inside the repository."""


class InvalidTokenError(GhAnalyzerError):
    """The bearer token cannot be encoded into a header value."""


# ── GitHub API errors ───────────────────────────────────────────────────────


class AuthRequiredError(GhAnalyzerError):
    """The quota check was rejected with 401; credentials must be fixed."""


class RateLimitExceededError(GhAnalyzerError):
    """No API calls remain in the current rate-limit window."""

    def __init__(self, reset_at: int, reset_time: str) -> None:
        super().__init__(f"API rate limit exceeded. Resets at {reset_time}")
        self.reset_at = reset_at
        self.reset_time = reset_time


class RepositoryNotFoundError(GhAnalyzerError):
    """The repository metadata endpoint returned 404."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Repository not found: {path}")
        self.path = path


class NetworkError(GhAnalyzerError):
    """Transport failure, unexpected status, or an undecodable 200 body."""


class ContentDecodeError(NetworkError):
    """A file envelope carried content that is not valid base64 UTF-8 text."""
