# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Hitalo M. <https://github.com/HitaloM>

from .base import ContentStore
from .errors import ConflictError, MissingReferenceError, NotFoundError, StoreError
from .memory import MemoryStore
from .models import (
    Comment,
    CommentCreate,
    GithubRepository,
    GithubRepositoryCreate,
    GithubRepositoryUpdate,
    Post,
    PostCreate,
    PostDetail,
    PostTag,
    PostTagCreate,
    PostWithRelations,
    Tag,
    TagCreate,
    TilEntry,
    TilEntryCreate,
    TilEntryWithRelations,
    TilTag,
    TilTagCreate,
    User,
    UserCreate,
    UserUpdate,
)

__all__ = (
    "Comment",
    "CommentCreate",
    "ConflictError",
    "ContentStore",
    "GithubRepository",
    "GithubRepositoryCreate",
    "GithubRepositoryUpdate",
    "MemoryStore",
    "MissingReferenceError",
    "NotFoundError",
    "Post",
    "PostCreate",
    "PostDetail",
    "PostTag",
    "PostTagCreate",
    "PostWithRelations",
    "StoreError",
    "Tag",
    "TagCreate",
    "TilEntry",
    "TilEntryCreate",
    "TilEntryWithRelations",
    "TilTag",
    "TilTagCreate",
    "User",
    "UserCreate",
    "UserUpdate",
)
