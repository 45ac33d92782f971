"""GitHub GraphQL queries used by forkscan."""

import logging
from typing import Dict, Optional

from forkscan.core.constants import FORKS_PAGE_SIZE
from forkscan.core.exceptions import GitHubAPIError
from forkscan.core.models import ForkNetworkView

logger = logging.getLogger(__name__)

FORKS_QUERY = """
query($owner: String!, $name: String!, $first: Int!) {
  repository(owner: $owner, name: $name) {
    ...repoParts
    parent {
      ...repoParts
      forks {
        totalCount
      }
    }
    forks(first: $first, orderBy: {field: STARGAZERS, direction: DESC}) {
      totalCount
      nodes {
        ...repoParts
        forks {
          totalCount
        }
      }
    }
  }
}

fragment repoParts on Repository {
  issues {
    totalCount
  }
  stargazers {
    totalCount
  }
  pullRequests {
    totalCount
  }
  url
  nameWithOwner
  pushedAt
}
"""


class GitHubGraphQLMethods:
    """
    GraphQL queries built on top of ``graphql_request``.

    Mixed into GitHubAPI, which provides the transport.
    """

    def graphql_request(self, query: str, variables: Optional[Dict] = None) -> Dict:
        raise NotImplementedError

    def get_fork_network(
        self, owner: str, name: str, first: int = FORKS_PAGE_SIZE
    ) -> ForkNetworkView:
        """
        Fetch a repository, its parent and its most-starred forks.

        Args:
            owner: Repository owner
            name: Repository name
            first: Maximum number of forks to fetch

        Returns:
            ForkNetworkView: Normalized fork network

        Raises:
            GitHubAPIError: If the request fails or the repository is missing
        """
        variables = {"owner": owner, "name": name, "first": first}
        data = self.graphql_request(FORKS_QUERY, variables)

        repository = data.get("repository")
        if not repository:
            raise GitHubAPIError(
                f"Could not resolve to a Repository with the name '{owner}/{name}'."
            )

        view = ForkNetworkView.from_graphql(repository)
        logger.debug(
            f"Fetched {len(view.forks)} of {view.fork_total} forks for {owner}/{name}"
            f"{' (fork of ' + view.parent.name_with_owner + ')' if view.parent else ''}"
        )
        return view
