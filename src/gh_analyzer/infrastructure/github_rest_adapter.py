"""GitHub REST API adapter — implements the RepoFetcher port."""

from __future__ import annotations

import base64
import binascii
import logging
from typing import Any
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from gh_analyzer.domain.entities import RateLimitStatus, RepoInfo, RepoStats
from gh_analyzer.domain.exceptions import (
    AuthRequiredError,
    ContentDecodeError,
    NetworkError,
    RepositoryNotFoundError,
)
from gh_analyzer.domain.value_objects import RepoPath
from gh_analyzer.infrastructure.github_schemas import (
    ContentEnvelope,
    LanguagesPayload,
    RepoPayload,
    parse_rate_limit,
    parse_stats,
)

logger = logging.getLogger(__name__)


class GitHubRestAdapter:
    """Concrete RepoFetcher backed by the GitHub v3 REST API.

    The injected client is expected to come from
    :func:`gh_analyzer.infrastructure.http_client.build_client`, i.e. it
    already carries the base URL, headers, timeout and credentials.
    """

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def check_rate_limit(self) -> RateLimitStatus:
        """GET /rate_limit → RateLimitStatus."""
        resp = await self._api_get("/rate_limit")
        if resp.status_code == 401:
            raise AuthRequiredError(
                "Authentication required. Check the GITHUB_TOKEN environment variable."
            )
        _raise_for_status(resp)
        remaining, reset = parse_rate_limit(_json(resp))
        logger.debug("Rate limit: %d calls remaining, resets at %d", remaining, reset)
        return RateLimitStatus(remaining=remaining, reset=reset)

    async def fetch_repository(self, path: RepoPath) -> tuple[RepoInfo, RepoStats]:
        """GET /repos/{owner}/{repo} → (RepoInfo, RepoStats)."""
        resp = await self._api_get(f"/repos/{path.full_name}")
        if resp.status_code == 404:
            raise RepositoryNotFoundError(path.full_name)
        _raise_for_status(resp)

        data = _json(resp)
        try:
            info = RepoPayload.model_validate(data).to_entity()
        except ValidationError as exc:
            raise NetworkError(
                f"Unexpected repository payload for {path.full_name}: {exc}"
            ) from exc
        return info, parse_stats(data)

    async def fetch_languages(self, path: RepoPath) -> dict[str, int]:
        """GET /repos/{owner}/{repo}/languages → {lang: bytes}."""
        resp = await self._api_get(f"/repos/{path.full_name}/languages")
        _raise_for_status(resp)
        try:
            return LanguagesPayload.model_validate(_json(resp)).root
        except ValidationError as exc:
            raise NetworkError(
                f"Unexpected languages payload for {path.full_name}: {exc}"
            ) from exc

    async def fetch_file_content(self, path: RepoPath, filename: str) -> str | None:
        """GET /repos/{owner}/{repo}/contents/{filename} → decoded text or None."""
        resp = await self._api_get(
            f"/repos/{path.full_name}/contents/{quote(filename, safe='/')}"
        )
        if resp.status_code == 404:
            logger.debug("%s: %s not found", path.full_name, filename)
            return None
        _raise_for_status(resp)

        data = _json(resp)
        if isinstance(data, list):
            # Directory listings come back as a bare array.
            return None
        try:
            envelope = ContentEnvelope.model_validate(data)
        except ValidationError as exc:
            raise NetworkError(f"Unexpected contents payload for {filename}: {exc}") from exc

        if envelope.type != "file" or envelope.content is None:
            logger.debug("%s: %s is a %s, skipping", path.full_name, filename, envelope.type)
            return None
        return decode_content(envelope.content, filename)

    async def _api_get(self, endpoint: str) -> httpx.Response:
        """Perform a GitHub API GET request, translating transport failures."""
        try:
            return await self._client.get(endpoint)
        except httpx.HTTPError as exc:
            raise NetworkError(f"Network error fetching {endpoint}: {exc}") from exc


def decode_content(encoded: str, filename: str = "<content>") -> str:
    """Decode a base64 body that GitHub wraps with embedded newlines."""
    compact = encoded.replace("\n", "").replace("\r", "")
    try:
        raw = base64.b64decode(compact, validate=True)
    except binascii.Error as exc:
        raise ContentDecodeError(f"{filename}: invalid base64 content") from exc
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ContentDecodeError(f"{filename}: content is not valid UTF-8") from exc


def _raise_for_status(resp: httpx.Response) -> None:
    try:
        resp.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise NetworkError(
            f"GitHub API returned HTTP {resp.status_code} for {resp.request.url}"
        ) from exc


def _json(resp: httpx.Response) -> Any:
    try:
        return resp.json()
    except ValueError as exc:
        raise NetworkError(f"Invalid JSON from {resp.request.url}: {exc}") from exc
