# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Hitalo M. <https://github.com/HitaloM>

from __future__ import annotations

from aiohttp import web
from pydantic import ValidationError

from devfolio.web.errors import RequestValidationError
from devfolio.web.keys import CONTENT_SERVICE, REPOSITORY_SYNC
from devfolio.web.requests import read_json
from devfolio.web.responses import json_response
from devfolio.web.schemas import GithubSyncRequest

routes = web.RouteTableDef()


@routes.get("/api/github/repos")
async def blog_owner_repositories(request: web.Request) -> web.Response:
    return json_response(await request.app[REPOSITORY_SYNC].sync_blog_owner())


@routes.get("/api/github/language/{language}")
async def repositories_by_language(request: web.Request) -> web.Response:
    language = request.match_info["language"]
    return json_response(await request.app[CONTENT_SERVICE].get_github_repositories_by_language(language))


@routes.get("/api/github/search")
async def search_repositories(request: web.Request) -> web.Response:
    return json_response(await request.app[CONTENT_SERVICE].search_github_repositories(request.query.get("q", "")))


@routes.post("/api/github/sync")
async def sync_repositories(request: web.Request) -> web.Response:
    try:
        payload = GithubSyncRequest.model_validate(await read_json(request))
    except ValidationError as exc:
        msg = "Username and userId are required"
        raise RequestValidationError(msg) from exc

    repositories = await request.app[REPOSITORY_SYNC].sync_account(payload.username, payload.user_id)
    return json_response({
        "message": f"Successfully synced {len(repositories)} repositories",
        "repositories": repositories,
    })
