# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Hitalo M. <https://github.com/HitaloM>

from .base import BaseRepository
from .comments import CommentsRepository
from .github import GithubRepositoriesRepository
from .posts import PostsRepository
from .tags import TagsRepository
from .til import TilRepository
from .users import UsersRepository

__all__ = (
    "BaseRepository",
    "CommentsRepository",
    "GithubRepositoriesRepository",
    "PostsRepository",
    "TagsRepository",
    "TilRepository",
    "UsersRepository",
)
