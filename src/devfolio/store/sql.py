# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Hitalo M. <https://github.com/HitaloM>

from __future__ import annotations

from typing import TYPE_CHECKING

from devfolio.db.repositories import (
    CommentsRepository,
    GithubRepositoriesRepository,
    PostsRepository,
    TagsRepository,
    TilRepository,
    UsersRepository,
)

from .base import ContentStore

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncEngine

    from devfolio.db import AsyncSessionMaker


class SqlStore(
    UsersRepository,
    TagsRepository,
    PostsRepository,
    CommentsRepository,
    TilRepository,
    GithubRepositoriesRepository,
    ContentStore,
):
    """Relational store backed by an async SQLAlchemy engine."""

    __slots__ = ("_engine",)

    def __init__(self, session_maker: AsyncSessionMaker, *, engine: AsyncEngine | None = None) -> None:
        super().__init__(session_maker)
        self._engine = engine

    async def aclose(self) -> None:
        if self._engine is not None:
            await self._engine.dispose()
            self._engine = None
