# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Hitalo M. <https://github.com/HitaloM>

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import select

from devfolio.db.models import User
from devfolio.store import models as schemas
from devfolio.store.errors import ConflictError, NotFoundError

from .base import BaseRepository

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession


class UsersRepository(BaseRepository[User]):
    __slots__ = ()

    @staticmethod
    async def _ensure_username_free(session: AsyncSession, username: str, *, exclude_id: int | None = None) -> None:
        stmt = select(User.id).where(User.username == username)
        if exclude_id is not None:
            stmt = stmt.where(User.id != exclude_id)

        if (await session.execute(stmt.limit(1))).scalar_one_or_none() is not None:
            raise ConflictError("User", "username")

    async def get_user(self, user_id: int) -> schemas.User | None:
        async with self._session() as session:
            user = await session.get(User, user_id)
            return schemas.User.model_validate(user) if user else None

    async def get_user_by_username(self, username: str) -> schemas.User | None:
        async with self._session() as session:
            result = await session.execute(select(User).where(User.username == username).limit(1))
            user = result.scalar_one_or_none()
            return schemas.User.model_validate(user) if user else None

    async def get_blog_owner(self) -> schemas.User | None:
        async with self._session() as session:
            result = await session.execute(select(User).order_by(User.id).limit(1))
            user = result.scalar_one_or_none()
            return schemas.User.model_validate(user) if user else None

    async def list_users(self) -> list[schemas.User]:
        async with self._session() as session:
            result = await session.scalars(select(User).order_by(User.id))
            return [schemas.User.model_validate(user) for user in result]

    async def create_user(self, data: schemas.UserCreate) -> schemas.User:
        async with self._session() as session:
            await self._ensure_username_free(session, data.username)

            user = User(**data.to_fields())
            session.add(user)
            await self._commit(session, "User")
            await session.refresh(user)
            return schemas.User.model_validate(user)

    async def update_user(self, user_id: int, data: schemas.UserUpdate) -> schemas.User:
        async with self._session() as session:
            user = await session.get(User, user_id)
            if user is None:
                raise NotFoundError("User", user_id)

            changes = data.to_fields()
            if "username" in changes:
                await self._ensure_username_free(session, str(changes["username"]), exclude_id=user_id)

            for field, value in changes.items():
                setattr(user, field, value)

            await self._commit(session, "User")
            await session.refresh(user)
            return schemas.User.model_validate(user)
