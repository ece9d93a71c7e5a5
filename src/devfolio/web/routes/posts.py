# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Hitalo M. <https://github.com/HitaloM>

from __future__ import annotations

from aiohttp import web

from devfolio.services.content import DEFAULT_FEATURED_LIMIT, DEFAULT_POPULAR_LIMIT, DEFAULT_RECENT_LIMIT
from devfolio.store.models import CommentCreate
from devfolio.web.keys import CONTENT_SERVICE
from devfolio.web.requests import parse_body, parse_limit
from devfolio.web.responses import error_response, json_response
from devfolio.web.schemas import PostCreateRequest

routes = web.RouteTableDef()


@routes.get("/api/posts")
async def list_posts(request: web.Request) -> web.Response:
    return json_response(await request.app[CONTENT_SERVICE].get_posts_with_relations())


@routes.get("/api/posts/featured")
async def featured_posts(request: web.Request) -> web.Response:
    limit = parse_limit(request, DEFAULT_FEATURED_LIMIT)
    return json_response(await request.app[CONTENT_SERVICE].get_featured_posts(limit))


@routes.get("/api/posts/recent")
async def recent_posts(request: web.Request) -> web.Response:
    limit = parse_limit(request, DEFAULT_RECENT_LIMIT)
    return json_response(await request.app[CONTENT_SERVICE].get_recent_posts(limit))


@routes.get("/api/posts/popular")
async def popular_posts(request: web.Request) -> web.Response:
    limit = parse_limit(request, DEFAULT_POPULAR_LIMIT)
    return json_response(await request.app[CONTENT_SERVICE].get_popular_posts(limit))


@routes.get("/api/posts/{slug}")
async def get_post(request: web.Request) -> web.Response:
    post = await request.app[CONTENT_SERVICE].get_post_by_slug(request.match_info["slug"])
    if post is None:
        return error_response("Post not found", status=404)
    return json_response(post)


@routes.post("/api/posts")
async def create_post(request: web.Request) -> web.Response:
    payload = await parse_body(request, PostCreateRequest)
    post = await request.app[CONTENT_SERVICE].create_post(payload.to_create(), payload.tags)
    return json_response(post, status=201)


@routes.get("/api/search")
async def search_posts(request: web.Request) -> web.Response:
    return json_response(await request.app[CONTENT_SERVICE].search_posts(request.query.get("q", "")))


@routes.post("/api/comments")
async def create_comment(request: web.Request) -> web.Response:
    data = await parse_body(request, CommentCreate)
    comment = await request.app[CONTENT_SERVICE].store.create_comment(data)
    return json_response(comment, status=201)
