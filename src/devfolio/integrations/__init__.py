# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Hitalo M. <https://github.com/HitaloM>

from .github import (
    ConfigurationError,
    ExternalNotFoundError,
    ExternalServiceError,
    GitHubRepositoryFetcher,
    GitHubRepositoryPayload,
    RepositorySyncError,
)

__all__ = (
    "ConfigurationError",
    "ExternalNotFoundError",
    "ExternalServiceError",
    "GitHubRepositoryFetcher",
    "GitHubRepositoryPayload",
    "RepositorySyncError",
)
