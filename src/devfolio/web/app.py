# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Hitalo M. <https://github.com/HitaloM>

from __future__ import annotations

from aiohttp import web

from .middlewares import error_middleware
from .routes import github, posts, tags, til, users


def create_app() -> web.Application:
    """Build the JSON API application.

    The services under :data:`~devfolio.web.keys.CONTENT_SERVICE` and
    :data:`~devfolio.web.keys.REPOSITORY_SYNC` are provided by the caller,
    usually through :func:`devfolio.container.setup_dependencies`.
    """
    app = web.Application(middlewares=[error_middleware])
    for module in (posts, tags, users, til, github):
        app.add_routes(module.routes)
    return app
