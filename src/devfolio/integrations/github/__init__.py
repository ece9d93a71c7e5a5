# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Hitalo M. <https://github.com/HitaloM>

from .client import GITHUB_API, GitHubConfig, GitHubRepositoryFetcher
from .errors import ConfigurationError, ExternalNotFoundError, ExternalServiceError, RepositorySyncError
from .models import GitHubRepositoryPayload

__all__ = (
    "GITHUB_API",
    "ConfigurationError",
    "ExternalNotFoundError",
    "ExternalServiceError",
    "GitHubConfig",
    "GitHubRepositoryFetcher",
    "GitHubRepositoryPayload",
    "RepositorySyncError",
)
