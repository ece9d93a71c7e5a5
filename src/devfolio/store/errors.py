# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Hitalo M. <https://github.com/HitaloM>

from __future__ import annotations


class StoreError(RuntimeError):
    __slots__ = ()


class NotFoundError(StoreError):
    __slots__ = ("entity", "key")

    def __init__(self, entity: str, key: object, *, message: str | None = None) -> None:
        super().__init__(message or f"{entity} {key!r} not found")
        self.entity = entity
        self.key = key


class ConflictError(StoreError):
    __slots__ = ("entity", "field")

    def __init__(self, entity: str, field: str | None = None) -> None:
        message = f"{entity} already exists"
        if field:
            message = f"{entity} with this {field} already exists"

        super().__init__(message)
        self.entity = entity
        self.field = field


class MissingReferenceError(StoreError):
    __slots__ = ("entity", "key")

    def __init__(self, entity: str, key: object) -> None:
        super().__init__(f"Referenced {entity} {key!r} does not exist")
        self.entity = entity
        self.key = key
