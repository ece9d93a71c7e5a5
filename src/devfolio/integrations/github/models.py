# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Hitalo M. <https://github.com/HitaloM>

from __future__ import annotations

from datetime import datetime  # noqa: TC003

from pydantic import BaseModel, ConfigDict, Field


class GitHubRepositoryPayload(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int = Field(description="GitHub repository identifier")
    name: str = Field(min_length=1, description="Repository name")
    full_name: str | None = Field(default=None, description="owner/name path")
    description: str | None = Field(default=None, description="Repository description")
    html_url: str = Field(description="Repository web URL")
    homepage: str | None = Field(default=None, description="Project homepage")
    stargazers_count: int = Field(default=0, description="Star count")
    forks_count: int = Field(default=0, description="Fork count")
    topics: list[str] = Field(default_factory=list, description="Repository topics")
    created_at: datetime | None = Field(default=None, description="Creation time on GitHub")
    languages_url: str | None = Field(default=None, description="Endpoint with the language byte counts")
    owner_login: str | None = Field(default=None, description="Login of the repository owner")

    @classmethod
    def from_api(cls, data: dict[str, object]) -> GitHubRepositoryPayload:
        owner = data.get("owner")
        login = owner.get("login") if isinstance(owner, dict) else None
        return cls.model_validate({**data, "owner_login": login})
