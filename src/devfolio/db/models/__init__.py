# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Hitalo M. <https://github.com/HitaloM>

from .comment import Comment
from .github_repository import GithubRepository
from .post import Post, PostTag
from .tag import Tag
from .til import TilEntry, TilTag
from .user import User

__all__ = ("Comment", "GithubRepository", "Post", "PostTag", "Tag", "TilEntry", "TilTag", "User")
