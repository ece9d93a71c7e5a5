# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Hitalo M. <https://github.com/HitaloM>

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import select

from devfolio.db.models import Tag, TilEntry, TilTag, User
from devfolio.store import models as schemas
from devfolio.store.errors import MissingReferenceError

from .base import BaseRepository

if TYPE_CHECKING:
    from sqlalchemy import Select


class TilRepository(BaseRepository[TilEntry]):
    __slots__ = ()

    async def _fetch_entries(self, stmt: Select[tuple[TilEntry]]) -> list[schemas.TilEntry]:
        async with self._session() as session:
            result = await session.scalars(stmt.order_by(TilEntry.created_at.desc(), TilEntry.id.desc()))
            return [schemas.TilEntry.model_validate(entry) for entry in result]

    async def get_til_entry(self, til_id: int) -> schemas.TilEntry | None:
        async with self._session() as session:
            entry = await session.get(TilEntry, til_id)
            return schemas.TilEntry.model_validate(entry) if entry else None

    async def list_til_entries(self, *, limit: int | None = None) -> list[schemas.TilEntry]:
        stmt = select(TilEntry)
        return await self._fetch_entries(stmt.limit(limit) if limit is not None else stmt)

    async def list_til_entries_by_tag(self, tag_id: int) -> list[schemas.TilEntry]:
        tagged = select(TilTag.til_id).where(TilTag.tag_id == tag_id)
        return await self._fetch_entries(select(TilEntry).where(TilEntry.id.in_(tagged)))

    async def search_til_entries(self, term: str) -> list[schemas.TilEntry]:
        return await self._fetch_entries(select(TilEntry).where(self._contains(term, TilEntry.title, TilEntry.content)))

    async def create_til_entry(self, data: schemas.TilEntryCreate) -> schemas.TilEntry:
        async with self._session() as session:
            await self._require(session, User, data.author_id, "user")

            entry = TilEntry(**data.model_dump())
            session.add(entry)
            await self._commit(session, "TIL entry")
            await session.refresh(entry)
            return schemas.TilEntry.model_validate(entry)

    async def get_til_tags(self, til_id: int) -> list[schemas.Tag]:
        async with self._session() as session:
            stmt = select(Tag).join(TilTag, TilTag.tag_id == Tag.id).where(TilTag.til_id == til_id)
            result = await session.scalars(stmt.order_by(TilTag.id))
            return [schemas.Tag.model_validate(tag) for tag in result]

    async def add_tag_to_til(self, data: schemas.TilTagCreate) -> schemas.TilTag:
        async with self._session() as session:
            stmt = select(TilTag).where(TilTag.til_id == data.til_id, TilTag.tag_id == data.tag_id)
            link = (await session.execute(stmt.limit(1))).scalar_one_or_none()
            if link:
                return schemas.TilTag.model_validate(link)

            if await session.get(TilEntry, data.til_id) is None:
                raise MissingReferenceError("TIL entry", data.til_id)
            await self._require(session, Tag, data.tag_id, "tag")

            link = TilTag(til_id=data.til_id, tag_id=data.tag_id)
            session.add(link)
            await self._commit(session, "TIL tag")
            await session.refresh(link)
            return schemas.TilTag.model_validate(link)
