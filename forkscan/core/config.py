"""Runtime configuration for forkscan."""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from forkscan.core.constants import (
    FORKS_PAGE_SIZE,
    GITHUB_GRAPHQL_URL,
    GITHUB_TOKEN_ENV,
    TOKEN_HELP_URL,
)
from forkscan.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    """
    Explicit configuration handed to the API client at process start.

    Attributes:
        token: GitHub personal access token
        graphql_url: GraphQL endpoint the query is sent to
        forks_limit: Maximum number of forks fetched (most-starred first)
        timeout: Request timeout in seconds, None for the transport default
    """

    token: str
    graphql_url: str = GITHUB_GRAPHQL_URL
    forks_limit: int = FORKS_PAGE_SIZE
    timeout: Optional[float] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from environment variables.

        Args:
            environ: Mapping to read from (defaults to os.environ)

        Returns:
            Settings: Resolved configuration

        Raises:
            ConfigurationError: If GITHUB_TOKEN is unset or blank
        """
        if environ is None:
            environ = os.environ

        token = (environ.get(GITHUB_TOKEN_ENV) or "").strip()
        if not token:
            raise ConfigurationError(
                f"Set {GITHUB_TOKEN_ENV} to a GitHub personal access token {TOKEN_HELP_URL}"
            )

        logger.debug(f"Loaded GitHub token from {GITHUB_TOKEN_ENV}")
        return cls(token=token)
