# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Hitalo M. <https://github.com/HitaloM>

from __future__ import annotations

from sqlalchemy import select

from devfolio.db.models import Comment, Post
from devfolio.store import models as schemas

from .base import BaseRepository


class CommentsRepository(BaseRepository[Comment]):
    __slots__ = ()

    async def get_post_comments(self, post_id: int) -> list[schemas.Comment]:
        async with self._session() as session:
            stmt = select(Comment).where(Comment.post_id == post_id)
            result = await session.scalars(stmt.order_by(Comment.created_at.desc(), Comment.id.desc()))
            return [schemas.Comment.model_validate(comment) for comment in result]

    async def create_comment(self, data: schemas.CommentCreate) -> schemas.Comment:
        async with self._session() as session:
            await self._require(session, Post, data.post_id, "post")

            comment = Comment(**data.model_dump())
            session.add(comment)
            await self._commit(session, "Comment")
            await session.refresh(comment)
            return schemas.Comment.model_validate(comment)
