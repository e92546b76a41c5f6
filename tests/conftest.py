"""Shared test fixtures."""

from __future__ import annotations

import base64
from typing import Any, Callable

import httpx
import pytest

from gh_analyzer.infrastructure.http_client import build_client

RESET_AT = 1_700_000_000


class GitHubStub:
    """In-memory GitHub API; unknown paths answer 404 and every call is recorded."""

    def __init__(self) -> None:
        self.routes: dict[str, Callable[[httpx.Request], httpx.Response]] = {}
        self.requests: list[httpx.Request] = []

    def add(self, path: str, status: int = 200, json: Any = None) -> None:
        self.routes[path] = lambda request: httpx.Response(status, json=json)

    def add_handler(self, path: str, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.routes[path] = handler

    def add_file(self, repo: str, filename: str, text: str) -> None:
        encoded = base64.b64encode(text.encode("utf-8")).decode("ascii")
        # GitHub wraps encoded content every 60 characters.
        wrapped = "\n".join(encoded[i : i + 60] for i in range(0, len(encoded), 60)) + "\n"
        self.add(
            f"/repos/{repo}/contents/{filename}",
            json={"type": "file", "encoding": "base64", "content": wrapped},
        )

    @property
    def paths(self) -> list[str]:
        return [r.url.path for r in self.requests]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get(request.url.path)
        if route is None:
            return httpx.Response(404, json={"message": "Not Found"})
        return route(request)

    def client(self, token: str | None = None) -> httpx.AsyncClient:
        return build_client(token, transport=httpx.MockTransport(self.handler))


def repo_payload(name: str = "x", **overrides: Any) -> dict[str, Any]:
    data: dict[str, Any] = {
        "name": name,
        "full_name": f"octo/{name}",
        "description": "A test repository",
        "html_url": f"https://github.com/octo/{name}",
        "stargazers_count": 5,
        "forks_count": 2,
        "created_at": "2020-01-01T00:00:00Z",
        "updated_at": "2024-06-01T12:00:00Z",
        "default_branch": "main",
        "license": {"key": "mit", "name": "MIT License", "spdx_id": "MIT", "url": None},
        "topics": ["cli", "github"],
        "visibility": "public",
        "open_issues_count": 7,
        "watchers_count": 5,
        "network_count": 2,
        "size": 1234,
    }
    data.update(overrides)
    return data


@pytest.fixture
def stub() -> GitHubStub:
    """A stub with quota available and a healthy ``octo/x`` repository."""
    gh = GitHubStub()
    gh.add("/rate_limit", json={"rate": {"limit": 60, "remaining": 10, "reset": RESET_AT}})
    gh.add("/repos/octo/x", json=repo_payload())
    gh.add("/repos/octo/x/languages", json={"Go": 100})
    return gh
