# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Hitalo M. <https://github.com/HitaloM>

from __future__ import annotations

from aiohttp import web

from devfolio.store.models import TagCreate
from devfolio.web.keys import CONTENT_SERVICE
from devfolio.web.requests import parse_body
from devfolio.web.responses import json_response

routes = web.RouteTableDef()


@routes.get("/api/tags")
async def list_tags(request: web.Request) -> web.Response:
    return json_response(await request.app[CONTENT_SERVICE].store.list_tags())


@routes.post("/api/tags")
async def create_tag(request: web.Request) -> web.Response:
    data = await parse_body(request, TagCreate)
    return json_response(await request.app[CONTENT_SERVICE].store.create_tag(data), status=201)


@routes.get("/api/tags/{slug}/posts")
async def tag_posts(request: web.Request) -> web.Response:
    # Unknown tags yield an empty listing rather than a 404
    return json_response(await request.app[CONTENT_SERVICE].get_posts_by_tag(request.match_info["slug"]))
