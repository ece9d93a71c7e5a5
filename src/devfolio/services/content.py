# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Hitalo M. <https://github.com/HitaloM>

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from devfolio.logging import get_logger
from devfolio.store.errors import MissingReferenceError
from devfolio.store.models import (
    PostDetail,
    PostTagCreate,
    PostWithRelations,
    TilEntryWithRelations,
    TilTagCreate,
)

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from devfolio.store import ContentStore
    from devfolio.store.models import GithubRepository, Post, PostCreate, TilEntry, TilEntryCreate, User

logger = get_logger(__name__)

DEFAULT_FEATURED_LIMIT: Final[int] = 1
DEFAULT_RECENT_LIMIT: Final[int] = 5
DEFAULT_POPULAR_LIMIT: Final[int] = 4
DEFAULT_RECENT_TIL_LIMIT: Final[int] = 5


def _blank(query: str) -> bool:
    return not query.strip()


class _AuthorCache:
    """Per-call memo of author rows so a listing looks each author up once."""

    __slots__ = ("_authors", "_store")

    def __init__(self, store: ContentStore) -> None:
        self._store = store
        self._authors: dict[int, User | None] = {}

    async def get(self, user_id: int) -> User | None:
        if user_id not in self._authors:
            self._authors[user_id] = await self._store.get_user(user_id)
        return self._authors[user_id]


class ContentService:
    """Read views that join posts and TIL entries with their authors, tags and comments."""

    __slots__ = ("_store",)

    def __init__(self, store: ContentStore) -> None:
        self._store = store

    @property
    def store(self) -> ContentStore:
        return self._store

    async def _require_tags(self, tag_ids: Iterable[int]) -> None:
        for tag_id in dict.fromkeys(tag_ids):
            if await self._store.get_tag(tag_id) is None:
                raise MissingReferenceError("tag", tag_id)

    # Posts

    async def _compose_posts(self, posts: Iterable[Post]) -> list[PostWithRelations]:
        authors = _AuthorCache(self._store)
        views: list[PostWithRelations] = []
        for post in posts:
            author = await authors.get(post.author_id)
            if author is None:
                await logger.awarning("Skipping post with missing author", post_id=post.id, author_id=post.author_id)
                continue

            tags = await self._store.get_post_tags(post.id)
            views.append(PostWithRelations.model_validate({**post.model_dump(), "author": author, "tags": tags}))
        return views

    async def get_post_by_slug(self, slug: str) -> PostDetail | None:
        post = await self._store.get_post_by_slug(slug)
        if post is None:
            return None

        author = await self._store.get_user(post.author_id)
        if author is None:
            await logger.awarning("Post author is missing", slug=slug, author_id=post.author_id)
            return None

        tags = await self._store.get_post_tags(post.id)
        comments = await self._store.get_post_comments(post.id)
        return PostDetail.model_validate({**post.model_dump(), "author": author, "tags": tags, "comments": comments})

    async def get_posts_with_relations(self) -> list[PostWithRelations]:
        return await self._compose_posts(await self._store.list_posts())

    async def get_featured_posts(self, limit: int = DEFAULT_FEATURED_LIMIT) -> list[PostWithRelations]:
        return await self._compose_posts(await self._store.list_posts(published=True, featured=True, limit=limit))

    async def get_recent_posts(self, limit: int = DEFAULT_RECENT_LIMIT) -> list[PostWithRelations]:
        return await self._compose_posts(await self._store.list_posts(published=True, limit=limit))

    async def get_popular_posts(self, limit: int = DEFAULT_POPULAR_LIMIT) -> list[PostWithRelations]:
        # No popularity signal is tracked yet, so this is the recent listing
        return await self.get_recent_posts(limit)

    async def get_posts_by_tag(self, tag_slug: str) -> list[PostWithRelations]:
        tag = await self._store.get_tag_by_slug(tag_slug)
        if tag is None:
            return []
        return await self._compose_posts(await self._store.list_posts_by_tag(tag.id, published=True))

    async def search_posts(self, query: str) -> list[PostWithRelations]:
        if _blank(query):
            return []
        return await self._compose_posts(await self._store.search_posts(query, published=True))

    async def create_post(self, data: PostCreate, tag_ids: Sequence[int] = ()) -> Post:
        await self._require_tags(tag_ids)
        post = await self._store.create_post(data)
        for tag_id in dict.fromkeys(tag_ids):
            await self._store.add_tag_to_post(PostTagCreate(post_id=post.id, tag_id=tag_id))

        await logger.ainfo("Post created", post_id=post.id, slug=post.slug, tags=len(tag_ids))
        return post

    # TIL entries

    async def _compose_til_entries(self, entries: Iterable[TilEntry]) -> list[TilEntryWithRelations]:
        authors = _AuthorCache(self._store)
        views: list[TilEntryWithRelations] = []
        for entry in entries:
            author = await authors.get(entry.author_id)
            if author is None:
                await logger.awarning("Skipping TIL entry with missing author", til_id=entry.id)
                continue

            tags = await self._store.get_til_tags(entry.id)
            views.append(TilEntryWithRelations.model_validate({**entry.model_dump(), "author": author, "tags": tags}))
        return views

    async def get_til_entry(self, til_id: int) -> TilEntryWithRelations | None:
        entry = await self._store.get_til_entry(til_id)
        if entry is None:
            return None

        views = await self._compose_til_entries([entry])
        return views[0] if views else None

    async def get_til_entries_with_relations(self) -> list[TilEntryWithRelations]:
        return await self._compose_til_entries(await self._store.list_til_entries())

    async def get_recent_til_entries(self, limit: int = DEFAULT_RECENT_TIL_LIMIT) -> list[TilEntryWithRelations]:
        return await self._compose_til_entries(await self._store.list_til_entries(limit=limit))

    async def get_til_entries_by_tag(self, tag_slug: str) -> list[TilEntryWithRelations]:
        tag = await self._store.get_tag_by_slug(tag_slug)
        if tag is None:
            return []
        return await self._compose_til_entries(await self._store.list_til_entries_by_tag(tag.id))

    async def search_til_entries(self, query: str) -> list[TilEntryWithRelations]:
        if _blank(query):
            return []
        return await self._compose_til_entries(await self._store.search_til_entries(query))

    async def create_til_entry(self, data: TilEntryCreate, tag_ids: Sequence[int] = ()) -> TilEntry:
        await self._require_tags(tag_ids)
        entry = await self._store.create_til_entry(data)
        for tag_id in dict.fromkeys(tag_ids):
            await self._store.add_tag_to_til(TilTagCreate(til_id=entry.id, tag_id=tag_id))

        await logger.ainfo("TIL entry created", til_id=entry.id, tags=len(tag_ids))
        return entry

    # GitHub repositories

    async def get_all_github_repositories(self) -> list[GithubRepository]:
        return await self._store.list_github_repositories()

    async def get_github_repositories_by_language(self, language: str) -> list[GithubRepository]:
        # Languages live in a JSON map, so the filter runs here instead of in SQL
        repositories = await self._store.list_github_repositories()
        return [repository for repository in repositories if language in repository.languages]

    async def search_github_repositories(self, query: str) -> list[GithubRepository]:
        if _blank(query):
            return []
        return await self._store.search_github_repositories(query)
