# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Hitalo M. <https://github.com/HitaloM>

from __future__ import annotations

from .app import create_app
from .errors import RequestValidationError
from .keys import CONTENT_SERVICE, REPOSITORY_SYNC

__all__ = ("CONTENT_SERVICE", "REPOSITORY_SYNC", "RequestValidationError", "create_app")
