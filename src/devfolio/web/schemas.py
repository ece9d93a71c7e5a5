# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Hitalo M. <https://github.com/HitaloM>

from __future__ import annotations

from pydantic import Field

from devfolio.store.models import NonEmptyStr, PostCreate, TilEntryCreate, _Schema


class PostCreateRequest(PostCreate):
    tags: list[int] = Field(default_factory=list)

    def to_create(self) -> PostCreate:
        return PostCreate.model_validate(self.model_dump(exclude={"tags"}))


class TilEntryCreateRequest(TilEntryCreate):
    tags: list[int] = Field(default_factory=list)

    def to_create(self) -> TilEntryCreate:
        return TilEntryCreate.model_validate(self.model_dump(exclude={"tags"}))


class GithubSyncRequest(_Schema):
    username: NonEmptyStr
    user_id: int
