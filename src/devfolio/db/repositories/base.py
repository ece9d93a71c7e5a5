# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Hitalo M. <https://github.com/HitaloM>

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import func, or_
from sqlalchemy.exc import IntegrityError

from devfolio.store.errors import ConflictError, MissingReferenceError

if TYPE_CHECKING:
    from sqlalchemy import ColumnElement
    from sqlalchemy.ext.asyncio import AsyncSession
    from sqlalchemy.orm import InstrumentedAttribute

    from devfolio.db import AsyncSessionMaker
    from devfolio.db.base import Base


class BaseRepository[TModel: "Base"]:
    __slots__ = ("_session_maker",)

    def __init__(self, session_maker: AsyncSessionMaker) -> None:
        self._session_maker = session_maker

    def _session(self) -> AsyncSession:
        return self._session_maker()

    @staticmethod
    async def _commit(session: AsyncSession, entity: str) -> None:
        try:
            await session.commit()
        except IntegrityError as exc:
            await session.rollback()
            raise ConflictError(entity) from exc

    @staticmethod
    async def _require(session: AsyncSession, model: type[Base], key: int, entity: str) -> None:
        if await session.get(model, key) is None:
            raise MissingReferenceError(entity, key)

    @staticmethod
    def _contains(term: str, *columns: InstrumentedAttribute[str]) -> ColumnElement[bool]:
        needle = term.lower()
        return or_(*(func.lower(column).contains(needle, autoescape=True) for column in columns))
