# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Hitalo M. <https://github.com/HitaloM>

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import (
        Comment,
        CommentCreate,
        GithubRepository,
        GithubRepositoryCreate,
        GithubRepositoryUpdate,
        Post,
        PostCreate,
        PostTag,
        PostTagCreate,
        Tag,
        TagCreate,
        TilEntry,
        TilEntryCreate,
        TilTag,
        TilTagCreate,
        User,
        UserCreate,
        UserUpdate,
    )


class ContentStore(ABC):
    """Typed access to the blog tables.

    Lookups return ``None`` when the row is absent. Writes raise
    :class:`~devfolio.store.errors.ConflictError` on uniqueness violations,
    :class:`~devfolio.store.errors.MissingReferenceError` when a referenced row
    does not exist and :class:`~devfolio.store.errors.NotFoundError` when a
    partial update targets a missing row.

    Listings are ordered newest first (ties broken by id, descending) and tag
    lists follow the order in which the links were added.
    """

    __slots__ = ()

    async def aclose(self) -> None:
        return None

    # Users

    @abstractmethod
    async def get_user(self, user_id: int) -> User | None: ...

    @abstractmethod
    async def get_user_by_username(self, username: str) -> User | None: ...

    @abstractmethod
    async def get_blog_owner(self) -> User | None:
        """Return the user with the lowest id."""

    @abstractmethod
    async def list_users(self) -> list[User]: ...

    @abstractmethod
    async def create_user(self, data: UserCreate) -> User: ...

    @abstractmethod
    async def update_user(self, user_id: int, data: UserUpdate) -> User: ...

    # Tags

    @abstractmethod
    async def get_tag(self, tag_id: int) -> Tag | None: ...

    @abstractmethod
    async def get_tag_by_slug(self, slug: str) -> Tag | None: ...

    @abstractmethod
    async def list_tags(self) -> list[Tag]: ...

    @abstractmethod
    async def create_tag(self, data: TagCreate) -> Tag: ...

    # Posts

    @abstractmethod
    async def get_post(self, post_id: int) -> Post | None: ...

    @abstractmethod
    async def get_post_by_slug(self, slug: str) -> Post | None: ...

    @abstractmethod
    async def list_posts(
        self, *, published: bool | None = None, featured: bool | None = None, limit: int | None = None
    ) -> list[Post]: ...

    @abstractmethod
    async def list_posts_by_tag(self, tag_id: int, *, published: bool | None = None) -> list[Post]: ...

    @abstractmethod
    async def search_posts(self, term: str, *, published: bool | None = None) -> list[Post]:
        """Case-insensitive substring match on title, excerpt or content."""

    @abstractmethod
    async def create_post(self, data: PostCreate) -> Post: ...

    @abstractmethod
    async def get_post_tags(self, post_id: int) -> list[Tag]: ...

    @abstractmethod
    async def add_tag_to_post(self, data: PostTagCreate) -> PostTag:
        """Link a tag to a post, returning the existing link if there is one."""

    # Comments

    @abstractmethod
    async def get_post_comments(self, post_id: int) -> list[Comment]: ...

    @abstractmethod
    async def create_comment(self, data: CommentCreate) -> Comment: ...

    # TIL entries

    @abstractmethod
    async def get_til_entry(self, til_id: int) -> TilEntry | None: ...

    @abstractmethod
    async def list_til_entries(self, *, limit: int | None = None) -> list[TilEntry]: ...

    @abstractmethod
    async def list_til_entries_by_tag(self, tag_id: int) -> list[TilEntry]: ...

    @abstractmethod
    async def search_til_entries(self, term: str) -> list[TilEntry]:
        """Case-insensitive substring match on title or content."""

    @abstractmethod
    async def create_til_entry(self, data: TilEntryCreate) -> TilEntry: ...

    @abstractmethod
    async def get_til_tags(self, til_id: int) -> list[Tag]: ...

    @abstractmethod
    async def add_tag_to_til(self, data: TilTagCreate) -> TilTag:
        """Link a tag to a TIL entry, returning the existing link if there is one."""

    # GitHub repositories

    @abstractmethod
    async def get_github_repository(self, repository_id: int) -> GithubRepository | None: ...

    @abstractmethod
    async def list_github_repositories(self) -> list[GithubRepository]: ...

    @abstractmethod
    async def get_github_repositories_by_user(self, user_id: int) -> list[GithubRepository]: ...

    @abstractmethod
    async def create_github_repository(self, data: GithubRepositoryCreate) -> GithubRepository: ...

    @abstractmethod
    async def update_github_repository(
        self, repository_id: int, data: GithubRepositoryUpdate
    ) -> GithubRepository: ...

    @abstractmethod
    async def upsert_github_repository(self, data: GithubRepositoryCreate) -> GithubRepository:
        """Insert the repository or update the row with the same external id."""

    @abstractmethod
    async def search_github_repositories(self, term: str) -> list[GithubRepository]:
        """Case-insensitive substring match on name or URL."""
