# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Hitalo M. <https://github.com/HitaloM>

from __future__ import annotations

from typing import TYPE_CHECKING

from aiohttp import web
from pydantic import ValidationError

from devfolio.integrations.github import ConfigurationError, ExternalServiceError
from devfolio.logging import get_logger
from devfolio.store.errors import ConflictError, MissingReferenceError, NotFoundError

from .errors import RequestValidationError
from .requests import format_validation_error
from .responses import error_response

if TYPE_CHECKING:
    from aiohttp.typedefs import Handler

logger = get_logger(__name__)

SYNC_FAILED_MESSAGE = "Error syncing GitHub repositories"
INTERNAL_ERROR_MESSAGE = "Internal server error"


@web.middleware
async def error_middleware(request: web.Request, handler: Handler) -> web.StreamResponse:
    """Turn every failure into a JSON {"message": ...} response."""
    try:
        return await handler(request)
    except web.HTTPException as exc:
        if exc.status < 400:
            raise
        return error_response(exc.reason, status=exc.status)
    except ValidationError as exc:
        message = format_validation_error(exc)
        await logger.adebug("Rejected request body", path=request.path, error=message)
        return error_response(message, status=400)
    except (RequestValidationError, MissingReferenceError) as exc:
        await logger.adebug("Rejected request", path=request.path, error=str(exc))
        return error_response(str(exc), status=400)
    except NotFoundError as exc:
        await logger.adebug("Resource not found", path=request.path, error=str(exc))
        return error_response(str(exc), status=404)
    except ConflictError as exc:
        await logger.awarning("Conflicting write", path=request.path, error=str(exc))
        return error_response(str(exc), status=409)
    except ConfigurationError as exc:
        await logger.aerror("Service misconfigured", path=request.path, error=str(exc))
        return error_response(str(exc), status=500)
    except ExternalServiceError as exc:
        await logger.aerror("External service failed", path=request.path, error=str(exc))
        return error_response(SYNC_FAILED_MESSAGE, status=500, error=str(exc))
    except Exception:
        await logger.aexception("Unhandled error", method=request.method, path=request.path)
        return error_response(INTERNAL_ERROR_MESSAGE, status=500)
