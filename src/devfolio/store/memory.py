# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Hitalo M. <https://github.com/HitaloM>

from __future__ import annotations

from datetime import UTC, datetime
from itertools import count
from typing import TYPE_CHECKING

from .base import ContentStore
from .errors import ConflictError, MissingReferenceError, NotFoundError
from .models import Comment, GithubRepository, Post, PostTag, Tag, TilEntry, TilTag, User

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator

    from .models import (
        CommentCreate,
        GithubRepositoryCreate,
        GithubRepositoryUpdate,
        PostCreate,
        PostTagCreate,
        TagCreate,
        TilEntryCreate,
        TilTagCreate,
        UserCreate,
        UserUpdate,
    )


def _newest_first[T: (Post, Comment, TilEntry, GithubRepository)](rows: Iterable[T]) -> list[T]:
    return sorted(rows, key=lambda row: (row.created_at, row.id), reverse=True)


def _contains(term: str, *values: str) -> bool:
    needle = term.lower()
    return any(needle in value.lower() for value in values)


class MemoryStore(ContentStore):
    """Dictionary-backed store for tests and throwaway demos."""

    __slots__ = (
        "_comments",
        "_ids",
        "_post_tags",
        "_posts",
        "_repositories",
        "_tags",
        "_til_entries",
        "_til_tags",
        "_users",
    )

    def __init__(self) -> None:
        self._users: dict[int, User] = {}
        self._tags: dict[int, Tag] = {}
        self._posts: dict[int, Post] = {}
        self._post_tags: dict[int, PostTag] = {}
        self._comments: dict[int, Comment] = {}
        self._til_entries: dict[int, TilEntry] = {}
        self._til_tags: dict[int, TilTag] = {}
        self._repositories: dict[int, GithubRepository] = {}
        self._ids: dict[str, Iterator[int]] = {}

    def _next_id(self, table: str) -> int:
        return next(self._ids.setdefault(table, count(1)))

    @staticmethod
    def _check_unique[T](
        rows: Iterable[T], entity: str, field: str, value: object, getter: Callable[[T], object]
    ) -> None:
        if any(getter(row) == value for row in rows):
            raise ConflictError(entity, field)

    def _require_user(self, user_id: int) -> None:
        if user_id not in self._users:
            raise MissingReferenceError("user", user_id)

    def _require_tag(self, tag_id: int) -> None:
        if tag_id not in self._tags:
            raise MissingReferenceError("tag", tag_id)

    # Users

    async def get_user(self, user_id: int) -> User | None:
        return self._users.get(user_id)

    async def get_user_by_username(self, username: str) -> User | None:
        return next((user for user in self._users.values() if user.username == username), None)

    async def get_blog_owner(self) -> User | None:
        return self._users[min(self._users)] if self._users else None

    async def list_users(self) -> list[User]:
        return sorted(self._users.values(), key=lambda user: user.id)

    async def create_user(self, data: UserCreate) -> User:
        self._check_unique(self._users.values(), "User", "username", data.username, lambda user: user.username)

        user = User.model_validate({**data.to_fields(), "id": self._next_id("users")})
        self._users[user.id] = user
        return user

    async def update_user(self, user_id: int, data: UserUpdate) -> User:
        user = self._users.get(user_id)
        if user is None:
            raise NotFoundError("User", user_id)

        changes = data.to_fields()
        if "username" in changes:
            others = (other for other in self._users.values() if other.id != user_id)
            self._check_unique(others, "User", "username", changes["username"], lambda other: other.username)

        updated = user.model_copy(update=changes)
        self._users[user_id] = updated
        return updated

    # Tags

    async def get_tag(self, tag_id: int) -> Tag | None:
        return self._tags.get(tag_id)

    async def get_tag_by_slug(self, slug: str) -> Tag | None:
        return next((tag for tag in self._tags.values() if tag.slug == slug), None)

    async def list_tags(self) -> list[Tag]:
        return sorted(self._tags.values(), key=lambda tag: tag.id)

    async def create_tag(self, data: TagCreate) -> Tag:
        self._check_unique(self._tags.values(), "Tag", "name", data.name, lambda tag: tag.name)
        self._check_unique(self._tags.values(), "Tag", "slug", data.slug, lambda tag: tag.slug)

        tag = Tag.model_validate({**data.model_dump(), "id": self._next_id("tags")})
        self._tags[tag.id] = tag
        return tag

    # Posts

    async def get_post(self, post_id: int) -> Post | None:
        return self._posts.get(post_id)

    async def get_post_by_slug(self, slug: str) -> Post | None:
        return next((post for post in self._posts.values() if post.slug == slug), None)

    def _filter_posts(self, posts: Iterable[Post], *, published: bool | None, featured: bool | None) -> list[Post]:
        return _newest_first(
            post
            for post in posts
            if (published is None or post.published == published) and (featured is None or post.featured == featured)
        )

    async def list_posts(
        self, *, published: bool | None = None, featured: bool | None = None, limit: int | None = None
    ) -> list[Post]:
        posts = self._filter_posts(self._posts.values(), published=published, featured=featured)
        return posts[:limit] if limit is not None else posts

    async def list_posts_by_tag(self, tag_id: int, *, published: bool | None = None) -> list[Post]:
        post_ids = {link.post_id for link in self._post_tags.values() if link.tag_id == tag_id}
        posts = (self._posts[post_id] for post_id in post_ids)
        return self._filter_posts(posts, published=published, featured=None)

    async def search_posts(self, term: str, *, published: bool | None = None) -> list[Post]:
        matches = (post for post in self._posts.values() if _contains(term, post.title, post.excerpt, post.content))
        return self._filter_posts(matches, published=published, featured=None)

    async def create_post(self, data: PostCreate) -> Post:
        self._check_unique(self._posts.values(), "Post", "slug", data.slug, lambda post: post.slug)
        self._require_user(data.author_id)

        post = Post.model_validate({**data.model_dump(), "id": self._next_id("posts"), "created_at": datetime.now(UTC)})
        self._posts[post.id] = post
        return post

    async def get_post_tags(self, post_id: int) -> list[Tag]:
        links = sorted((link for link in self._post_tags.values() if link.post_id == post_id), key=lambda x: x.id)
        return [self._tags[link.tag_id] for link in links]

    async def add_tag_to_post(self, data: PostTagCreate) -> PostTag:
        if data.post_id not in self._posts:
            raise MissingReferenceError("post", data.post_id)
        self._require_tag(data.tag_id)

        for link in self._post_tags.values():
            if link.post_id == data.post_id and link.tag_id == data.tag_id:
                return link

        link = PostTag(id=self._next_id("posts_tags"), post_id=data.post_id, tag_id=data.tag_id)
        self._post_tags[link.id] = link
        return link

    # Comments

    async def get_post_comments(self, post_id: int) -> list[Comment]:
        return _newest_first(comment for comment in self._comments.values() if comment.post_id == post_id)

    async def create_comment(self, data: CommentCreate) -> Comment:
        if data.post_id not in self._posts:
            raise MissingReferenceError("post", data.post_id)

        comment = Comment.model_validate(
            {**data.model_dump(), "id": self._next_id("comments"), "created_at": datetime.now(UTC)}
        )
        self._comments[comment.id] = comment
        return comment

    # TIL entries

    async def get_til_entry(self, til_id: int) -> TilEntry | None:
        return self._til_entries.get(til_id)

    async def list_til_entries(self, *, limit: int | None = None) -> list[TilEntry]:
        entries = _newest_first(self._til_entries.values())
        return entries[:limit] if limit is not None else entries

    async def list_til_entries_by_tag(self, tag_id: int) -> list[TilEntry]:
        til_ids = {link.til_id for link in self._til_tags.values() if link.tag_id == tag_id}
        return _newest_first(self._til_entries[til_id] for til_id in til_ids)

    async def search_til_entries(self, term: str) -> list[TilEntry]:
        return _newest_first(
            entry for entry in self._til_entries.values() if _contains(term, entry.title, entry.content)
        )

    async def create_til_entry(self, data: TilEntryCreate) -> TilEntry:
        self._require_user(data.author_id)

        entry = TilEntry.model_validate(
            {**data.model_dump(), "id": self._next_id("til_entries"), "created_at": datetime.now(UTC)}
        )
        self._til_entries[entry.id] = entry
        return entry

    async def get_til_tags(self, til_id: int) -> list[Tag]:
        links = sorted((link for link in self._til_tags.values() if link.til_id == til_id), key=lambda x: x.id)
        return [self._tags[link.tag_id] for link in links]

    async def add_tag_to_til(self, data: TilTagCreate) -> TilTag:
        if data.til_id not in self._til_entries:
            raise MissingReferenceError("TIL entry", data.til_id)
        self._require_tag(data.tag_id)

        for link in self._til_tags.values():
            if link.til_id == data.til_id and link.tag_id == data.tag_id:
                return link

        link = TilTag(id=self._next_id("til_tags"), til_id=data.til_id, tag_id=data.tag_id)
        self._til_tags[link.id] = link
        return link

    # GitHub repositories

    async def get_github_repository(self, repository_id: int) -> GithubRepository | None:
        return self._repositories.get(repository_id)

    async def list_github_repositories(self) -> list[GithubRepository]:
        return _newest_first(self._repositories.values())

    async def get_github_repositories_by_user(self, user_id: int) -> list[GithubRepository]:
        return _newest_first(repo for repo in self._repositories.values() if repo.user_id == user_id)

    async def create_github_repository(self, data: GithubRepositoryCreate) -> GithubRepository:
        if data.id in self._repositories:
            raise ConflictError("GitHub repository", "id")
        self._require_user(data.user_id)

        repository = GithubRepository.model_validate(data.model_dump())
        self._repositories[repository.id] = repository
        return repository

    async def update_github_repository(self, repository_id: int, data: GithubRepositoryUpdate) -> GithubRepository:
        repository = self._repositories.get(repository_id)
        if repository is None:
            raise NotFoundError("GitHub repository", repository_id)

        changes = data.to_fields()
        if "user_id" in changes:
            self._require_user(changes["user_id"])  # type: ignore[arg-type]

        updated = repository.model_copy(update=changes)
        self._repositories[repository_id] = updated
        return updated

    async def upsert_github_repository(self, data: GithubRepositoryCreate) -> GithubRepository:
        self._require_user(data.user_id)

        repository = GithubRepository.model_validate(data.model_dump())
        self._repositories[repository.id] = repository
        return repository

    async def search_github_repositories(self, term: str) -> list[GithubRepository]:
        return _newest_first(repo for repo in self._repositories.values() if _contains(term, repo.name, repo.url))
