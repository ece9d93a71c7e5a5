# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Hitalo M. <https://github.com/HitaloM>

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from devfolio.logging import get_logger
from devfolio.store.models import TagCreate, UserCreate

if TYPE_CHECKING:
    from devfolio.store import ContentStore

logger = get_logger(__name__)

DEMO_OWNER: Final[UserCreate] = UserCreate(
    username="alexjohnson",
    password="password123",  # noqa: S106
    full_name="Alex Johnson",
    bio="Building web applications with React, Node.js, and TypeScript. Passionate about clean code and performance.",
    avatar_url=(
        "https://images.unsplash.com/photo-1568602471122-7832951cc4c5"
        "?auto=format&fit=facearea&facepad=2&w=256&h=256&q=80"
    ),
    twitter_url="https://twitter.com",
    github_url="https://github.com",
    linkedin_url="https://linkedin.com",
    role="admin",
)

DEMO_TAGS: Final[tuple[TagCreate, ...]] = (
    TagCreate(name="React", slug="react", color="blue"),
    TagCreate(name="JavaScript", slug="javascript", color="yellow"),
    TagCreate(name="TypeScript", slug="typescript", color="purple"),
    TagCreate(name="Node.js", slug="nodejs", color="green"),
    TagCreate(name="Performance", slug="performance", color="emerald"),
    TagCreate(name="Docker", slug="docker", color="red"),
    TagCreate(name="DevOps", slug="devops", color="blue"),
    TagCreate(name="CSS", slug="css", color="indigo"),
)


async def seed_demo_content(store: ContentStore) -> bool:
    """Create the demo owner and tags on an empty store. Returns whether anything was written."""
    if await store.list_users():
        await logger.adebug("Store already has users, skipping demo content")
        return False

    await store.create_user(DEMO_OWNER)
    existing = {tag.slug for tag in await store.list_tags()}
    for tag in DEMO_TAGS:
        if tag.slug not in existing:
            await store.create_tag(tag)

    await logger.ainfo("Seeded demo content", tags=len(DEMO_TAGS))
    return True
