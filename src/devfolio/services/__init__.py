# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Hitalo M. <https://github.com/HitaloM>

from .content import ContentService
from .repository_sync import RepositorySyncService

__all__ = ("ContentService", "RepositorySyncService")
