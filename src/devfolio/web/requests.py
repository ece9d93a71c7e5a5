# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Hitalo M. <https://github.com/HitaloM>

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from .errors import RequestValidationError

if TYPE_CHECKING:
    from aiohttp import web
    from pydantic import BaseModel, ValidationError

MAX_LIMIT: Final[int] = 100


async def read_json(request: web.Request) -> dict[str, object]:
    try:
        payload = await request.json()
    except ValueError as exc:
        msg = "Request body must be valid JSON"
        raise RequestValidationError(msg) from exc

    if not isinstance(payload, dict):
        msg = "Request body must be a JSON object"
        raise RequestValidationError(msg)
    return payload


async def parse_body[TModel: "BaseModel"](request: web.Request, model: type[TModel]) -> TModel:
    return model.model_validate(await read_json(request))


def parse_limit(request: web.Request, default: int) -> int:
    raw = request.query.get("limit", "").strip()
    if not raw:
        return default

    try:
        limit = int(raw)
    except ValueError:
        limit = 0
    if not 1 <= limit <= MAX_LIMIT:
        msg = f"limit must be an integer between 1 and {MAX_LIMIT}"
        raise RequestValidationError(msg)
    return limit


def format_validation_error(exc: ValidationError) -> str:
    details = "; ".join(
        f"{'.'.join(str(part) for part in error['loc']) or 'body'}: {error['msg']}" for error in exc.errors()
    )
    return f"Validation error: {details}"


__all__ = ("format_validation_error", "parse_body", "parse_limit", "read_json")
