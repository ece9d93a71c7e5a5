# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Hitalo M. <https://github.com/HitaloM>

from __future__ import annotations

from datetime import UTC, datetime
from typing import Annotated
from urllib.parse import urlparse

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, computed_field
from pydantic.alias_generators import to_camel

from devfolio.security import hash_password

SLUG_PATTERN = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"
EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"

_REQUIRED_USER_FIELDS = frozenset({"username", "password", "full_name", "role"})
_REQUIRED_REPOSITORY_FIELDS = frozenset(
    {"user_id", "name", "url", "stars", "forks", "languages", "topics", "created_at"}
)


def _ensure_utc(value: datetime) -> datetime:
    return value if value.tzinfo else value.replace(tzinfo=UTC)


# SQLite hands back naive datetimes, everything we store is UTC
UtcDatetime = Annotated[datetime, AfterValidator(_ensure_utc)]
NonEmptyStr = Annotated[str, Field(min_length=1)]
Slug = Annotated[str, Field(min_length=1, max_length=128, pattern=SLUG_PATTERN)]


class _Schema(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True, extra="ignore")


class _Entity(_Schema):
    model_config = ConfigDict(frozen=True)


class User(_Entity):
    id: int
    username: str
    password_hash: str = Field(exclude=True, repr=False)
    full_name: str
    bio: str | None = None
    avatar_url: str | None = None
    twitter_url: str | None = None
    github_url: str | None = None
    linkedin_url: str | None = None
    role: str = "author"
    skills: list[str] | None = None
    introduction: str | None = None

    @computed_field
    @property
    def github_username(self) -> str | None:
        if not self.github_url:
            return None

        parsed = urlparse(self.github_url)
        if parsed.hostname not in {"github.com", "www.github.com"}:
            return None

        segments = [segment for segment in parsed.path.split("/") if segment]
        return segments[-1] if segments else None


class UserCreate(_Schema):
    username: NonEmptyStr
    password: NonEmptyStr = Field(repr=False)
    full_name: NonEmptyStr
    bio: str | None = None
    avatar_url: str | None = None
    twitter_url: str | None = None
    github_url: str | None = None
    linkedin_url: str | None = None
    role: str = "author"
    skills: list[str] | None = None
    introduction: str | None = None

    def to_fields(self) -> dict[str, object]:
        fields = self.model_dump(exclude={"password"})
        fields["password_hash"] = hash_password(self.password)
        return fields


class UserUpdate(_Schema):
    username: NonEmptyStr | None = None
    password: NonEmptyStr | None = Field(default=None, repr=False)
    full_name: NonEmptyStr | None = None
    bio: str | None = None
    avatar_url: str | None = None
    twitter_url: str | None = None
    github_url: str | None = None
    linkedin_url: str | None = None
    role: str | None = None
    skills: list[str] | None = None
    introduction: str | None = None

    def to_fields(self) -> dict[str, object]:
        """Return the explicitly supplied fields, with the password swapped for its hash.

        Explicit nulls clear optional columns but are dropped for required ones.
        """
        changes = {
            key: value
            for key, value in self.model_dump(exclude_unset=True).items()
            if value is not None or key not in _REQUIRED_USER_FIELDS
        }
        if (password := changes.pop("password", None)) is not None:
            changes["password_hash"] = hash_password(password)
        return changes


class Tag(_Entity):
    id: int
    name: str
    slug: str
    color: str = "blue"


class TagCreate(_Schema):
    name: NonEmptyStr
    slug: Slug
    color: str = "blue"


class Post(_Entity):
    id: int
    title: str
    slug: str
    excerpt: str
    content: str
    cover_image: str | None = None
    author_id: int
    published: bool = True
    featured: bool = False
    created_at: UtcDatetime
    reading_time: str | None = None


class PostCreate(_Schema):
    title: NonEmptyStr
    slug: Slug
    excerpt: NonEmptyStr
    content: NonEmptyStr
    cover_image: str | None = None
    author_id: int
    published: bool = True
    featured: bool = False
    reading_time: str | None = None


class PostTag(_Entity):
    id: int
    post_id: int
    tag_id: int


class PostTagCreate(_Schema):
    post_id: int
    tag_id: int


class Comment(_Entity):
    id: int
    content: str
    author_name: str
    author_email: str
    post_id: int
    created_at: UtcDatetime


class CommentCreate(_Schema):
    content: NonEmptyStr
    author_name: NonEmptyStr
    author_email: Annotated[str, Field(pattern=EMAIL_PATTERN)]
    post_id: int


class TilEntry(_Entity):
    id: int
    title: str
    content: str
    author_id: int
    created_at: UtcDatetime


class TilEntryCreate(_Schema):
    title: NonEmptyStr
    content: NonEmptyStr
    author_id: int


class TilTag(_Entity):
    id: int
    til_id: int
    tag_id: int


class TilTagCreate(_Schema):
    til_id: int
    tag_id: int


class GithubRepository(_Entity):
    id: int
    user_id: int
    name: str
    full_name: str | None = None
    description: str | None = None
    url: str
    homepage: str | None = None
    stars: int = 0
    forks: int = 0
    languages: dict[str, int] = Field(default_factory=dict)
    topics: list[str] = Field(default_factory=list)
    readme: str | None = None
    created_at: UtcDatetime


class GithubRepositoryCreate(_Schema):
    id: int
    user_id: int
    name: NonEmptyStr
    full_name: str | None = None
    description: str | None = None
    url: NonEmptyStr
    homepage: str | None = None
    stars: int = 0
    forks: int = 0
    languages: dict[str, int] = Field(default_factory=dict)
    topics: list[str] = Field(default_factory=list)
    readme: str | None = None
    created_at: UtcDatetime = Field(default_factory=lambda: datetime.now(UTC))


class GithubRepositoryUpdate(_Schema):
    user_id: int | None = None
    name: NonEmptyStr | None = None
    full_name: str | None = None
    description: str | None = None
    url: NonEmptyStr | None = None
    homepage: str | None = None
    stars: int | None = None
    forks: int | None = None
    languages: dict[str, int] | None = None
    topics: list[str] | None = None
    readme: str | None = None
    created_at: UtcDatetime | None = None

    def to_fields(self) -> dict[str, object]:
        return {
            key: value
            for key, value in self.model_dump(exclude_unset=True).items()
            if value is not None or key not in _REQUIRED_REPOSITORY_FIELDS
        }


class PostWithRelations(Post):
    author: User
    tags: list[Tag] = Field(default_factory=list)


class PostDetail(PostWithRelations):
    comments: list[Comment] = Field(default_factory=list)


class TilEntryWithRelations(TilEntry):
    author: User
    tags: list[Tag] = Field(default_factory=list)
