# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Hitalo M. <https://github.com/HitaloM>

from __future__ import annotations

from typing import Literal

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class BlogSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file="data/config.env",
        env_file_encoding="utf-8",
        env_prefix="BLOG_",
        extra="ignore",
        populate_by_name=True,
    )

    database_url: str = "sqlite+aiosqlite:///data/blog.sqlite3"
    storage_backend: Literal["sql", "memory"] = "sql"
    github_token: SecretStr | None = Field(
        default=None, validation_alias=AliasChoices("BLOG_GITHUB_TOKEN", "GITHUB_ACCESS_TOKEN")
    )
    github_timeout: float = Field(default=30.0, gt=0)
    github_concurrency: int = Field(default=4, ge=1)
    host: str = "0.0.0.0"  # noqa: S104
    port: int = 5000
    seed_demo_data: bool = False

    @property
    def resolved_github_token(self) -> str | None:
        return self.github_token.get_secret_value() if self.github_token else None
