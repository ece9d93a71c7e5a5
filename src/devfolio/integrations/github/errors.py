# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Hitalo M. <https://github.com/HitaloM>

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence


class ExternalServiceError(RuntimeError):
    __slots__ = ("details", "service", "status")

    def __init__(self, service: str = "GitHub", *, status: int | None = None, details: str | None = None) -> None:
        message = f"{service} API request failed"
        if status is not None:
            message = f"{message} (status {status})"
        if details:
            message = f"{message}: {details}"

        super().__init__(message)

        self.service = service
        self.status = status
        self.details = details


class ExternalNotFoundError(ExternalServiceError):
    def __init__(self, service: str = "GitHub", *, details: str = "Resource not found") -> None:
        super().__init__(service, status=404, details=details)


class ConfigurationError(RuntimeError):
    __slots__ = ("service",)

    def __init__(self, service: str = "GitHub") -> None:
        super().__init__(f"{service} API token not configured")
        self.service = service


class RepositorySyncError(ExternalServiceError):
    __slots__ = ("failed", "username")

    def __init__(self, username: str, failed: Sequence[str]) -> None:
        names = ", ".join(failed)
        super().__init__(details=f"could not sync {len(failed)} repositories for {username}: {names}")
        self.username = username
        self.failed = tuple(failed)
