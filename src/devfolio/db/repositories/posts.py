# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Hitalo M. <https://github.com/HitaloM>

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import select

from devfolio.db.models import Post, PostTag, Tag, User
from devfolio.store import models as schemas
from devfolio.store.errors import ConflictError, MissingReferenceError

from .base import BaseRepository

if TYPE_CHECKING:
    from sqlalchemy import Select


class PostsRepository(BaseRepository[Post]):
    __slots__ = ()

    @staticmethod
    def _newest_first(stmt: Select[tuple[Post]], *, published: bool | None) -> Select[tuple[Post]]:
        if published is not None:
            stmt = stmt.where(Post.published.is_(published))
        return stmt.order_by(Post.created_at.desc(), Post.id.desc())

    async def _fetch_posts(self, stmt: Select[tuple[Post]]) -> list[schemas.Post]:
        async with self._session() as session:
            result = await session.scalars(stmt)
            return [schemas.Post.model_validate(post) for post in result]

    async def get_post(self, post_id: int) -> schemas.Post | None:
        async with self._session() as session:
            post = await session.get(Post, post_id)
            return schemas.Post.model_validate(post) if post else None

    async def get_post_by_slug(self, slug: str) -> schemas.Post | None:
        async with self._session() as session:
            result = await session.execute(select(Post).where(Post.slug == slug).limit(1))
            post = result.scalar_one_or_none()
            return schemas.Post.model_validate(post) if post else None

    async def list_posts(
        self, *, published: bool | None = None, featured: bool | None = None, limit: int | None = None
    ) -> list[schemas.Post]:
        stmt = self._newest_first(select(Post), published=published)
        if featured is not None:
            stmt = stmt.where(Post.featured.is_(featured))
        if limit is not None:
            stmt = stmt.limit(limit)
        return await self._fetch_posts(stmt)

    async def list_posts_by_tag(self, tag_id: int, *, published: bool | None = None) -> list[schemas.Post]:
        tagged = select(PostTag.post_id).where(PostTag.tag_id == tag_id)
        stmt = self._newest_first(select(Post).where(Post.id.in_(tagged)), published=published)
        return await self._fetch_posts(stmt)

    async def search_posts(self, term: str, *, published: bool | None = None) -> list[schemas.Post]:
        matches = select(Post).where(self._contains(term, Post.title, Post.excerpt, Post.content))
        return await self._fetch_posts(self._newest_first(matches, published=published))

    async def create_post(self, data: schemas.PostCreate) -> schemas.Post:
        async with self._session() as session:
            existing = await session.execute(select(Post.id).where(Post.slug == data.slug).limit(1))
            if existing.scalar_one_or_none() is not None:
                raise ConflictError("Post", "slug")
            await self._require(session, User, data.author_id, "user")

            post = Post(**data.model_dump())
            session.add(post)
            await self._commit(session, "Post")
            await session.refresh(post)
            return schemas.Post.model_validate(post)

    async def get_post_tags(self, post_id: int) -> list[schemas.Tag]:
        async with self._session() as session:
            stmt = select(Tag).join(PostTag, PostTag.tag_id == Tag.id).where(PostTag.post_id == post_id)
            result = await session.scalars(stmt.order_by(PostTag.id))
            return [schemas.Tag.model_validate(tag) for tag in result]

    async def add_tag_to_post(self, data: schemas.PostTagCreate) -> schemas.PostTag:
        async with self._session() as session:
            stmt = select(PostTag).where(PostTag.post_id == data.post_id, PostTag.tag_id == data.tag_id)
            link = (await session.execute(stmt.limit(1))).scalar_one_or_none()
            if link:
                return schemas.PostTag.model_validate(link)

            if await session.get(Post, data.post_id) is None:
                raise MissingReferenceError("post", data.post_id)
            await self._require(session, Tag, data.tag_id, "tag")

            link = PostTag(post_id=data.post_id, tag_id=data.tag_id)
            session.add(link)
            await self._commit(session, "Post tag")
            await session.refresh(link)
            return schemas.PostTag.model_validate(link)
