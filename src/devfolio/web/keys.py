# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Hitalo M. <https://github.com/HitaloM>

from __future__ import annotations

from aiohttp import web

from devfolio.services import ContentService, RepositorySyncService

CONTENT_SERVICE = web.AppKey("content_service", ContentService)
REPOSITORY_SYNC = web.AppKey("repository_sync", RepositorySyncService)
