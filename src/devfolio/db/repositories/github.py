# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Hitalo M. <https://github.com/HitaloM>

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import select

from devfolio.db.models import GithubRepository, User
from devfolio.store import models as schemas
from devfolio.store.errors import ConflictError, NotFoundError

from .base import BaseRepository

if TYPE_CHECKING:
    from sqlalchemy import Select


class GithubRepositoriesRepository(BaseRepository[GithubRepository]):
    __slots__ = ()

    async def _fetch_repositories(self, stmt: Select[tuple[GithubRepository]]) -> list[schemas.GithubRepository]:
        async with self._session() as session:
            stmt = stmt.order_by(GithubRepository.created_at.desc(), GithubRepository.id.desc())
            result = await session.scalars(stmt)
            return [schemas.GithubRepository.model_validate(repository) for repository in result]

    async def get_github_repository(self, repository_id: int) -> schemas.GithubRepository | None:
        async with self._session() as session:
            repository = await session.get(GithubRepository, repository_id)
            return schemas.GithubRepository.model_validate(repository) if repository else None

    async def list_github_repositories(self) -> list[schemas.GithubRepository]:
        return await self._fetch_repositories(select(GithubRepository))

    async def get_github_repositories_by_user(self, user_id: int) -> list[schemas.GithubRepository]:
        return await self._fetch_repositories(select(GithubRepository).where(GithubRepository.user_id == user_id))

    async def create_github_repository(self, data: schemas.GithubRepositoryCreate) -> schemas.GithubRepository:
        async with self._session() as session:
            if await session.get(GithubRepository, data.id) is not None:
                raise ConflictError("GitHub repository", "id")
            await self._require(session, User, data.user_id, "user")

            repository = GithubRepository(**data.model_dump())
            session.add(repository)
            await self._commit(session, "GitHub repository")
            await session.refresh(repository)
            return schemas.GithubRepository.model_validate(repository)

    async def update_github_repository(
        self, repository_id: int, data: schemas.GithubRepositoryUpdate
    ) -> schemas.GithubRepository:
        async with self._session() as session:
            repository = await session.get(GithubRepository, repository_id)
            if repository is None:
                raise NotFoundError("GitHub repository", repository_id)

            changes = data.to_fields()
            if "user_id" in changes:
                await self._require(session, User, int(changes["user_id"]), "user")  # type: ignore[arg-type]

            for field, value in changes.items():
                setattr(repository, field, value)

            await self._commit(session, "GitHub repository")
            await session.refresh(repository)
            return schemas.GithubRepository.model_validate(repository)

    async def upsert_github_repository(self, data: schemas.GithubRepositoryCreate) -> schemas.GithubRepository:
        async with self._session() as session:
            await self._require(session, User, data.user_id, "user")

            fields = data.model_dump()
            repository = await session.get(GithubRepository, data.id)
            if repository:
                for field, value in fields.items():
                    setattr(repository, field, value)
            else:
                repository = GithubRepository(**fields)
                session.add(repository)

            await self._commit(session, "GitHub repository")
            await session.refresh(repository)
            return schemas.GithubRepository.model_validate(repository)

    async def search_github_repositories(self, term: str) -> list[schemas.GithubRepository]:
        matches = select(GithubRepository).where(self._contains(term, GithubRepository.name, GithubRepository.url))
        return await self._fetch_repositories(matches)
