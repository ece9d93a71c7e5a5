# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Hitalo M. <https://github.com/HitaloM>

from .base import Base
from .session import AsyncSessionMaker, apply_sqlite_pragmas, create_engine, create_session_maker, init_models

__all__ = (
    "AsyncSessionMaker",
    "Base",
    "apply_sqlite_pragmas",
    "create_engine",
    "create_session_maker",
    "init_models",
)
