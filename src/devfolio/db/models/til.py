# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Hitalo M. <https://github.com/HitaloM>

from __future__ import annotations

from datetime import UTC, datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column  # noqa: TC002

from devfolio.db.base import Base


class TilEntry(Base):
    __tablename__ = "til_entries"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255))
    content: Mapped[str] = mapped_column(Text)
    author_id: Mapped[int] = mapped_column(ForeignKey("users.id"), index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(UTC))


class TilTag(Base):
    __tablename__ = "til_tags"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    til_id: Mapped[int] = mapped_column(ForeignKey("til_entries.id"), index=True)
    tag_id: Mapped[int] = mapped_column(ForeignKey("tags.id"), index=True)

    __table_args__ = (UniqueConstraint("til_id", "tag_id", name="uq_til_tags_til_tag"),)
