# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Hitalo M. <https://github.com/HitaloM>

from __future__ import annotations

import tempfile
from pathlib import Path

from devfolio.db import create_engine, create_session_maker, init_models
from devfolio.integrations.github import ExternalServiceError, GitHubRepositoryPayload
from devfolio.store import PostCreate, TagCreate, TilEntryCreate, UserCreate
from devfolio.store.sql import SqlStore


def user_create(username: str = "alexjohnson", **overrides: object) -> UserCreate:
    fields: dict[str, object] = {
        "username": username,
        "password": "password123",
        "full_name": "Alex Johnson",
        "github_url": f"https://github.com/{username}",
        "role": "admin",
    }
    return UserCreate.model_validate({**fields, **overrides})


def tag_create(name: str = "React", slug: str | None = None, **overrides: object) -> TagCreate:
    return TagCreate.model_validate({"name": name, "slug": slug or name.lower(), **overrides})


def post_create(author_id: int, slug: str = "hello-world", **overrides: object) -> PostCreate:
    fields: dict[str, object] = {
        "title": slug.replace("-", " ").title(),
        "slug": slug,
        "excerpt": f"Excerpt of {slug}",
        "content": f"Content of {slug}",
        "author_id": author_id,
    }
    return PostCreate.model_validate({**fields, **overrides})


def til_create(author_id: int, title: str = "Python walrus", **overrides: object) -> TilEntryCreate:
    fields = {"title": title, "content": f"Today I learned: {title}", "author_id": author_id}
    return TilEntryCreate.model_validate({**fields, **overrides})


def repository_payload(repository_id: int, name: str, owner: str = "alexjohnson", **overrides: object):
    fields: dict[str, object] = {
        "id": repository_id,
        "name": name,
        "full_name": f"{owner}/{name}",
        "html_url": f"https://github.com/{owner}/{name}",
        "owner_login": owner,
        "stargazers_count": 3,
        "topics": ["demo"],
    }
    return GitHubRepositoryPayload.model_validate({**fields, **overrides})


class FakeFetcher:
    """Stands in for the GitHub client with canned responses."""

    def __init__(self, repositories=(), *, token: bool = True) -> None:
        self.repositories = list(repositories)
        self.languages: dict[str, dict[str, int]] = {}
        self.readmes: dict[str, str] = {}
        self.failing_languages: set[str] = set()
        self.failing_readmes: set[str] = set()
        self.fail_listing = False
        self.has_token = token
        self.calls: list[tuple[str, str]] = []

    async def list_repositories(self, username: str) -> list[GitHubRepositoryPayload]:
        self.calls.append(("list", username))
        if self.fail_listing:
            raise ExternalServiceError(status=502, details="bad gateway")
        return list(self.repositories)

    async def fetch_languages(self, owner: str, name: str, *, url: str | None = None) -> dict[str, int]:
        self.calls.append(("languages", name))
        if name in self.failing_languages:
            raise ExternalServiceError(status=500, details=f"{name} languages unavailable")
        return self.languages.get(name, {"Python": 100})

    async def fetch_readme(self, owner: str, name: str) -> str | None:
        self.calls.append(("readme", name))
        if name in self.failing_readmes:
            raise ExternalServiceError(status=500, details=f"{name} readme unavailable")
        return self.readmes.get(name)


class SqliteStoreFactory:
    """Creates SqlStore instances on a throwaway SQLite file."""

    def __init__(self) -> None:
        self._tmpdir = tempfile.TemporaryDirectory()

    async def create(self) -> SqlStore:
        path = Path(self._tmpdir.name) / "blog.sqlite3"
        engine = create_engine(f"sqlite+aiosqlite:///{path}")
        await init_models(engine)
        return SqlStore(create_session_maker(engine), engine=engine)

    def cleanup(self) -> None:
        self._tmpdir.cleanup()
