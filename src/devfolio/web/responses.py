# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Hitalo M. <https://github.com/HitaloM>

from __future__ import annotations

from aiohttp import web
from pydantic import BaseModel


def _dump(value: object) -> object:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True)
    if isinstance(value, list | tuple):
        return [_dump(item) for item in value]
    if isinstance(value, dict):
        return {key: _dump(item) for key, item in value.items()}
    return value


def json_response(payload: object, *, status: int = 200) -> web.Response:
    return web.json_response(_dump(payload), status=status)


def error_response(message: str, *, status: int, **extra: object) -> web.Response:
    return web.json_response({"message": message, **extra}, status=status)
