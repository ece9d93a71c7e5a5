# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Hitalo M. <https://github.com/HitaloM>

from . import github, posts, tags, til, users

__all__ = ("github", "posts", "tags", "til", "users")
