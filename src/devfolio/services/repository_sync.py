# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Hitalo M. <https://github.com/HitaloM>

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from anyio import CapacityLimiter, Lock, create_task_group

from devfolio.integrations.github import ConfigurationError, ExternalServiceError, RepositorySyncError
from devfolio.logging import get_logger
from devfolio.store.errors import MissingReferenceError, NotFoundError, StoreError
from devfolio.store.models import GithubRepositoryCreate

if TYPE_CHECKING:
    from devfolio.integrations.github import GitHubRepositoryFetcher, GitHubRepositoryPayload
    from devfolio.store import ContentStore
    from devfolio.store.models import GithubRepository, User

logger = get_logger(__name__)


class RepositorySyncService:
    """Mirror a GitHub account's repositories into the store.

    Each repository is fetched and upserted on its own: a failed language
    lookup skips that repository, a failed README lookup stores it without a
    README. Repositories that did sync stay persisted even when others fail;
    the failures are then reported together as a :class:`RepositorySyncError`.
    Syncs for the same user are serialized.
    """

    __slots__ = ("_fetcher", "_limiter", "_locks", "_store")

    def __init__(self, *, store: ContentStore, fetcher: GitHubRepositoryFetcher, concurrency: int = 4) -> None:
        self._store = store
        self._fetcher = fetcher
        self._limiter = CapacityLimiter(concurrency)
        self._locks: dict[int, Lock] = {}

    def _lock_for(self, user_id: int) -> Lock:
        return self._locks.setdefault(user_id, Lock())

    async def resolve_blog_owner(self) -> User:
        owner = await self._store.get_blog_owner()
        if owner is None or not owner.github_username:
            raise NotFoundError("User", None, message="User or GitHub username not found")
        return owner

    async def sync_blog_owner(self) -> list[GithubRepository]:
        owner = await self.resolve_blog_owner()
        return await self.sync_account(owner.github_username or "", owner.id)

    async def sync_account(self, username: str, user_id: int) -> list[GithubRepository]:
        if not self._fetcher.has_token:
            raise ConfigurationError
        if await self._store.get_user(user_id) is None:
            raise MissingReferenceError("user", user_id)

        async with self._lock_for(user_id):
            await logger.ainfo("Syncing GitHub repositories", username=username, user_id=user_id)
            payloads = await self._fetcher.list_repositories(username)
            failed: list[str] = []

            async def sync_one(payload: GitHubRepositoryPayload) -> None:
                async with self._limiter:
                    if not await self._sync_repository(username, user_id, payload):
                        failed.append(payload.name)

            try:
                async with create_task_group() as task_group:
                    for payload in payloads:
                        task_group.start_soon(sync_one, payload)
            except* Exception as exc_group:
                first = exc_group.exceptions[0]
                await logger.aerror("Repository sync aborted", username=username, error=str(first))
                raise first

            if failed:
                await logger.awarning("Repository sync incomplete", username=username, failed=failed)
                raise RepositorySyncError(username, sorted(failed))

            repositories = await self._store.get_github_repositories_by_user(user_id)
            await logger.ainfo("GitHub repositories synced", username=username, count=len(payloads))
            return repositories

    async def _sync_repository(self, username: str, user_id: int, payload: GitHubRepositoryPayload) -> bool:
        owner = payload.owner_login or username

        try:
            languages = await self._fetcher.fetch_languages(owner, payload.name, url=payload.languages_url)
        except ExternalServiceError as exc:
            await logger.awarning("Skipping repository without language data", repository=payload.name, error=str(exc))
            return False

        try:
            readme = await self._fetcher.fetch_readme(owner, payload.name)
        except ExternalServiceError as exc:
            await logger.awarning("README unavailable", repository=payload.name, error=str(exc))
            readme = None
        else:
            if readme is None:
                await logger.adebug("No README found", repository=payload.name)

        data = GithubRepositoryCreate(
            id=payload.id,
            user_id=user_id,
            name=payload.name,
            full_name=payload.full_name,
            description=payload.description,
            url=payload.html_url,
            homepage=payload.homepage or None,
            stars=payload.stargazers_count,
            forks=payload.forks_count,
            languages=languages,
            topics=payload.topics,
            readme=readme,
            created_at=payload.created_at or datetime.now(UTC),
        )

        try:
            await self._store.upsert_github_repository(data)
        except StoreError as exc:
            await logger.awarning("Could not store repository", repository=payload.name, error=str(exc))
            return False
        return True
