"""
GitHub API client for forkscan.

This module provides the authenticated GraphQL transport used to fetch a
repository's fork network. Exactly one request is made per query; failures
are raised as GitHubAPIError and never retried.
"""

import time
import logging
from typing import Dict, Optional

import requests

from forkscan.api.github_api_graphql import GitHubGraphQLMethods
from forkscan.core.config import Settings
from forkscan.core.constants import GITHUB_GRAPHQL_URL
from forkscan.core.exceptions import GitHubAPIError

# Configure module logger
logger = logging.getLogger(__name__)


class GitHubAPI(GitHubGraphQLMethods):
    """
    GitHub GraphQL API client.

    Attributes:
        graphql_url: GraphQL endpoint
        timeout: Request timeout in seconds, None for the transport default
        session: Persistent session carrying the bearer token
    """

    def __init__(
        self,
        token: str,
        graphql_url: str = GITHUB_GRAPHQL_URL,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the GitHub API client.

        Args:
            token: GitHub personal access token used as bearer token
            graphql_url: GraphQL endpoint to POST queries to
            timeout: Request timeout in seconds
            session: Session to reuse (a new one is created if omitted)
        """
        self.graphql_url = graphql_url
        self.timeout = timeout

        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "Authorization": f"Bearer {token}",
                "Accept": "application/json",
            }
        )

        logger.debug("GitHub API client initialized for %s", self.graphql_url)

    @classmethod
    def from_settings(
        cls, settings: Settings, session: Optional[requests.Session] = None
    ) -> "GitHubAPI":
        return cls(
            settings.token,
            graphql_url=settings.graphql_url,
            timeout=settings.timeout,
            session=session,
        )

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "GitHubAPI":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def graphql_request(self, query: str, variables: Optional[Dict] = None) -> Dict:
        """
        Make a GraphQL request to the GitHub API.

        Args:
            query: GraphQL query string
            variables: Variables for the GraphQL query

        Returns:
            Dict: The ``data`` object of the response

        Raises:
            GitHubAPIError: On network failure, non-200 status, a body that
                is not JSON, or any GraphQL error in the response
        """
        json_data = {"query": query, "variables": variables or {}}
        logger.debug(f"GraphQL request variables: {json_data['variables']}")

        started = time.monotonic()
        try:
            response = self.session.post(self.graphql_url, json=json_data, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.debug(f"GraphQL network error: {e}")
            raise GitHubAPIError(str(e) or repr(e)) from e

        logger.debug(
            f"GraphQL response {response.status_code} in {time.monotonic() - started:.2f}s "
            f"({len(response.content or b'')} bytes)"
        )

        try:
            result = response.json()
        except ValueError:
            result = None

        if response.status_code != 200:
            message = None
            if isinstance(result, dict):
                message = result.get("message")
            raise GitHubAPIError(
                f"GitHub API HTTP error: {response.status_code} - {message or response.text}",
                status_code=response.status_code,
            )

        if not isinstance(result, dict):
            raise GitHubAPIError(
                "GitHub API returned a non-JSON response", status_code=response.status_code
            )

        errors = result.get("errors")
        if errors:
            messages = [str(error.get("message") or error) for error in errors]
            raise GitHubAPIError(
                f"GraphQL error: {'; '.join(messages)}",
                status_code=response.status_code,
                errors=errors,
            )

        return result.get("data") or {}
