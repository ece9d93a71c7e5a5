# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Hitalo M. <https://github.com/HitaloM>

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from aiohttp import ClientSession, ClientTimeout
from sqlalchemy.engine import make_url

from .db import apply_sqlite_pragmas, create_engine, create_session_maker, init_models
from .integrations.github import GitHubRepositoryFetcher
from .logging import get_logger
from .seed import seed_demo_content
from .services import ContentService, RepositorySyncService
from .store import MemoryStore
from .store.sql import SqlStore
from .web.keys import CONTENT_SERVICE, REPOSITORY_SYNC

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from aiohttp import web

    from .config import BlogSettings
    from .store import ContentStore

logger = get_logger(__name__)


def _ensure_sqlite_directory(database_url: str) -> None:
    url = make_url(database_url)
    if url.get_backend_name() == "sqlite" and url.database and url.database != ":memory:":
        Path(url.database).parent.mkdir(parents=True, exist_ok=True)


async def create_store(settings: BlogSettings) -> ContentStore:
    if settings.storage_backend == "memory":
        await logger.awarning("Using the in-memory store, content is lost on shutdown")
        return MemoryStore()

    _ensure_sqlite_directory(settings.database_url)
    engine = create_engine(settings.database_url)
    await init_models(engine)
    if engine.dialect.name == "sqlite":
        await apply_sqlite_pragmas(engine)

    return SqlStore(create_session_maker(engine), engine=engine)


def setup_dependencies(app: web.Application, settings: BlogSettings) -> None:
    async def resources(app: web.Application) -> AsyncIterator[None]:
        session = ClientSession(timeout=ClientTimeout(total=settings.github_timeout))
        store: ContentStore | None = None
        try:
            store = await create_store(settings)
            if settings.seed_demo_data:
                await seed_demo_content(store)

            fetcher = GitHubRepositoryFetcher(session=session, token=settings.resolved_github_token)
            if not fetcher.has_token:
                await logger.awarning("GitHub token not configured, repository sync is disabled")

            app[CONTENT_SERVICE] = ContentService(store)
            app[REPOSITORY_SYNC] = RepositorySyncService(
                store=store, fetcher=fetcher, concurrency=settings.github_concurrency
            )
            await logger.ainfo("Dependencies ready", storage=settings.storage_backend)
            yield
        finally:
            await session.close()
            if store is not None:
                await store.aclose()

    app.cleanup_ctx.append(resources)
