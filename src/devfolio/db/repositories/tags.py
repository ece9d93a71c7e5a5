# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Hitalo M. <https://github.com/HitaloM>

from __future__ import annotations

from sqlalchemy import select

from devfolio.db.models import Tag
from devfolio.store import models as schemas
from devfolio.store.errors import ConflictError

from .base import BaseRepository


class TagsRepository(BaseRepository[Tag]):
    __slots__ = ()

    async def get_tag(self, tag_id: int) -> schemas.Tag | None:
        async with self._session() as session:
            tag = await session.get(Tag, tag_id)
            return schemas.Tag.model_validate(tag) if tag else None

    async def get_tag_by_slug(self, slug: str) -> schemas.Tag | None:
        async with self._session() as session:
            result = await session.execute(select(Tag).where(Tag.slug == slug).limit(1))
            tag = result.scalar_one_or_none()
            return schemas.Tag.model_validate(tag) if tag else None

    async def list_tags(self) -> list[schemas.Tag]:
        async with self._session() as session:
            result = await session.scalars(select(Tag).order_by(Tag.id))
            return [schemas.Tag.model_validate(tag) for tag in result]

    async def create_tag(self, data: schemas.TagCreate) -> schemas.Tag:
        async with self._session() as session:
            for field, column, value in (("name", Tag.name, data.name), ("slug", Tag.slug, data.slug)):
                existing = await session.execute(select(Tag.id).where(column == value).limit(1))
                if existing.scalar_one_or_none() is not None:
                    raise ConflictError("Tag", field)

            tag = Tag(**data.model_dump())
            session.add(tag)
            await self._commit(session, "Tag")
            await session.refresh(tag)
            return schemas.Tag.model_validate(tag)
