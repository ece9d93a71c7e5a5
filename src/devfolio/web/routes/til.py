# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Hitalo M. <https://github.com/HitaloM>

from __future__ import annotations

from aiohttp import web

from devfolio.services.content import DEFAULT_RECENT_TIL_LIMIT
from devfolio.web.keys import CONTENT_SERVICE
from devfolio.web.requests import parse_body, parse_limit
from devfolio.web.responses import error_response, json_response
from devfolio.web.schemas import TilEntryCreateRequest

routes = web.RouteTableDef()


@routes.get("/api/til")
async def list_til_entries(request: web.Request) -> web.Response:
    return json_response(await request.app[CONTENT_SERVICE].get_til_entries_with_relations())


@routes.get("/api/til/recent")
async def recent_til_entries(request: web.Request) -> web.Response:
    limit = parse_limit(request, DEFAULT_RECENT_TIL_LIMIT)
    return json_response(await request.app[CONTENT_SERVICE].get_recent_til_entries(limit))


@routes.get("/api/til/search")
async def search_til_entries(request: web.Request) -> web.Response:
    return json_response(await request.app[CONTENT_SERVICE].search_til_entries(request.query.get("q", "")))


@routes.get(r"/api/til/{id:\d+}")
async def get_til_entry(request: web.Request) -> web.Response:
    entry = await request.app[CONTENT_SERVICE].get_til_entry(int(request.match_info["id"]))
    if entry is None:
        return error_response("TIL entry not found", status=404)
    return json_response(entry)


@routes.post("/api/til")
async def create_til_entry(request: web.Request) -> web.Response:
    payload = await parse_body(request, TilEntryCreateRequest)
    entry = await request.app[CONTENT_SERVICE].create_til_entry(payload.to_create(), payload.tags)
    return json_response(entry, status=201)


@routes.get("/api/tags/{slug}/til")
async def tag_til_entries(request: web.Request) -> web.Response:
    return json_response(await request.app[CONTENT_SERVICE].get_til_entries_by_tag(request.match_info["slug"]))
