# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Hitalo M. <https://github.com/HitaloM>

from __future__ import annotations

import base64
from binascii import Error as BinasciiError
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final, Self

from aiohttp import ClientError, ClientResponseError
from anyio import to_thread
from pydantic import ValidationError

from devfolio.logging import get_logger

from .errors import ExternalNotFoundError, ExternalServiceError
from .models import GitHubRepositoryPayload

if TYPE_CHECKING:
    from aiohttp import ClientSession

logger = get_logger(__name__)

GITHUB_API: Final[str] = "https://api.github.com"
_GITHUB_API_VERSION: Final[str] = "2022-11-28"
_DEFAULT_USER_AGENT: Final[str] = "devfolio/1.0"
_PER_PAGE: Final[int] = 100


@dataclass(frozen=True, slots=True)
class GitHubConfig:
    token: str | None = None
    api_url: str = GITHUB_API
    user_agent: str = _DEFAULT_USER_AGENT
    api_version: str = _GITHUB_API_VERSION


async def _decode_base64(payload: str) -> str:
    def decode_strict() -> str:
        buffer = base64.b64decode(payload, validate=True)
        return buffer.decode("utf-8", errors="replace")

    def decode_lenient() -> str:
        buffer = base64.b64decode(payload, validate=False)
        return buffer.decode("utf-8", errors="replace")

    try:
        return await to_thread.run_sync(decode_strict)
    except BinasciiError:
        # GitHub wraps the payload at 60 columns, which strict validation rejects
        await logger.adebug("Base64 validation failed, retrying without validation")

    try:
        return await to_thread.run_sync(decode_lenient)
    except (BinasciiError, ValueError) as exc:
        await logger.aerror("Failed to decode content", error=str(exc))
        raise ExternalServiceError(details="Unable to decode README content") from exc


class GitHubRepositoryFetcher:
    """Read-only client for the parts of the GitHub REST API the repository mirror needs."""

    __slots__ = ("_config", "_session")

    def __init__(
        self,
        *,
        session: ClientSession,
        token: str | None = None,
        api_url: str = GITHUB_API,
        user_agent: str = _DEFAULT_USER_AGENT,
    ) -> None:
        self._session = session
        self._config = GitHubConfig(token=token, api_url=api_url.rstrip("/"), user_agent=user_agent)

    @property
    def has_token(self) -> bool:
        return bool(self._config.token)

    @property
    def _headers(self) -> dict[str, str]:
        headers = {
            "Accept": "application/vnd.github+json",
            "User-Agent": self._config.user_agent,
            "X-GitHub-Api-Version": self._config.api_version,
        }
        if self._config.token:
            headers["Authorization"] = f"Bearer {self._config.token}"
        return headers

    async def _make_request(
        self, url: str, *, params: dict[str, str | int] | None = None, ignore_404: bool = False
    ) -> object | None:
        await logger.adebug("Making GitHub API request", url=url, has_params=params is not None)

        try:
            async with self._session.get(url, headers=self._headers, params=params) as response:
                if response.status == 404:
                    if ignore_404:
                        await logger.adebug("Resource not found (ignored)", url=url)
                        return None
                    await logger.awarning("GitHub resource not found", url=url)
                    raise ExternalNotFoundError(details=f"{url} not found")

                try:
                    response.raise_for_status()
                except ClientResponseError as exc:
                    body = await response.text()
                    await logger.aerror(
                        "GitHub API request failed", url=url, status=exc.status, details=body[:200] if body else None
                    )
                    raise ExternalServiceError(status=exc.status, details=body[:200] or exc.message) from exc

                return await response.json()
        except (ClientError, TimeoutError, ValueError) as exc:
            await logger.aerror("GitHub API transport error", url=url, error=repr(exc))
            raise ExternalServiceError(details=str(exc) or type(exc).__name__) from exc

    async def list_repositories(self, username: str) -> list[GitHubRepositoryPayload]:
        """Return every public repository of ``username``, following pagination."""
        await logger.ainfo("Listing GitHub repositories", username=username)

        repositories: list[GitHubRepositoryPayload] = []
        page = 1
        while True:
            data = await self._make_request(
                f"{self._config.api_url}/users/{username}/repos", params={"per_page": _PER_PAGE, "page": page}
            )
            if not isinstance(data, list):
                raise ExternalServiceError(details="Unexpected repositories payload")

            try:
                repositories.extend(GitHubRepositoryPayload.from_api(item) for item in data if isinstance(item, dict))
            except ValidationError as exc:
                raise ExternalServiceError(details="Unexpected repository payload") from exc

            if len(data) < _PER_PAGE:
                break
            page += 1

        await logger.adebug("Listed GitHub repositories", username=username, count=len(repositories), pages=page)
        return repositories

    async def fetch_languages(self, owner: str, name: str, *, url: str | None = None) -> dict[str, int]:
        data = await self._make_request(url or f"{self._config.api_url}/repos/{owner}/{name}/languages")
        if not isinstance(data, dict):
            raise ExternalServiceError(details="Unexpected languages payload")

        return {
            language: size for language, size in data.items() if isinstance(language, str) and isinstance(size, int)
        }

    async def fetch_readme(self, owner: str, name: str) -> str | None:
        """Return the decoded README text, or ``None`` when the repository has none."""
        data = await self._make_request(f"{self._config.api_url}/repos/{owner}/{name}/readme", ignore_404=True)
        if not data:
            return None
        if not isinstance(data, dict):
            raise ExternalServiceError(details="Unexpected README payload")

        encoded_content = data.get("content")
        if not encoded_content:
            return None

        encoding = str(data.get("encoding", "base64"))
        if encoding.lower() == "base64":
            return await _decode_base64(encoded_content)
        return str(encoded_content)

    async def aclose(self) -> None:
        if not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *_exc_info: object) -> None:
        await self.aclose()
