"""HTTP client factory for the GitHub REST API."""

from __future__ import annotations

from typing import Generator

import httpx

from gh_analyzer.domain.exceptions import InvalidTokenError

GITHUB_API = "https://api.github.com"
ACCEPT = "application/vnd.github.v3+json"
USER_AGENT = "gh-analyzer/1.0"
DEFAULT_TIMEOUT = 30.0


class BearerAuth(httpx.Auth):
    """Attach ``Authorization: Bearer <token>`` to every request.

    The token is not part of the client's default headers and is masked in
    ``repr``.
    """

    def __init__(self, token: str) -> None:
        self._header = _encode_token(token)

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers["Authorization"] = self._header
        yield request

    def __repr__(self) -> str:
        return "BearerAuth(token='**********')"


def _encode_token(token: str) -> str:
    token = token.strip()
    if not token:
        raise InvalidTokenError("GitHub token is empty.")
    value = f"Bearer {token}"
    try:
        value.encode("ascii")
    except UnicodeEncodeError as exc:
        raise InvalidTokenError("GitHub token contains non-ASCII characters.") from exc
    if any(ch in value for ch in "\r\n\0"):
        raise InvalidTokenError("GitHub token contains control characters.")
    return value


def build_client(
    token: str | None = None,
    *,
    base_url: str = GITHUB_API,
    timeout: float = DEFAULT_TIMEOUT,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Return an ``AsyncClient`` preconfigured for the GitHub v3 API.

    Redirects are followed; GitHub answers renamed or transferred
    repositories with a 301.  No request is issued here.  Raises
    :class:`InvalidTokenError` when the token cannot form a valid header value.
    """
    auth = BearerAuth(token) if token is not None else None
    return httpx.AsyncClient(
        base_url=base_url,
        headers={"Accept": ACCEPT, "User-Agent": USER_AGENT},
        timeout=httpx.Timeout(timeout),
        auth=auth,
        follow_redirects=True,
        transport=transport,
    )
