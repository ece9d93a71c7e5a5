# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Hitalo M. <https://github.com/HitaloM>

from __future__ import annotations

from aiohttp import web

from devfolio.store.models import UserCreate, UserUpdate
from devfolio.web.keys import CONTENT_SERVICE
from devfolio.web.requests import parse_body
from devfolio.web.responses import error_response, json_response

routes = web.RouteTableDef()

USER_NOT_FOUND = "User not found"


@routes.get("/api/users")
async def list_users(request: web.Request) -> web.Response:
    return json_response(await request.app[CONTENT_SERVICE].store.list_users())


@routes.get(r"/api/users/{id:\d+}")
async def get_user(request: web.Request) -> web.Response:
    user = await request.app[CONTENT_SERVICE].store.get_user(int(request.match_info["id"]))
    if user is None:
        return error_response(USER_NOT_FOUND, status=404)
    return json_response(user)


@routes.post("/api/users")
async def create_user(request: web.Request) -> web.Response:
    data = await parse_body(request, UserCreate)
    return json_response(await request.app[CONTENT_SERVICE].store.create_user(data), status=201)


@routes.put(r"/api/users/{id:\d+}")
async def update_user(request: web.Request) -> web.Response:
    store = request.app[CONTENT_SERVICE].store
    user_id = int(request.match_info["id"])
    if await store.get_user(user_id) is None:
        return error_response(USER_NOT_FOUND, status=404)

    data = await parse_body(request, UserUpdate)
    return json_response(await store.update_user(user_id, data))
