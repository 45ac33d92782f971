"""
Repository models for the fork network report.

GraphQL responses are normalized here, once, into plain dataclasses so the
rest of the package never deals with raw response dictionaries.
"""

import datetime
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from forkscan.utils.date_utils import parse_timestamp


def normalize_count(value: Any) -> int:
    """
    Convert a count field to a plain integer.

    GitHub returns counts either as raw numbers (``stargazerCount``) or as
    connection objects (``stargazers { totalCount }``). Missing values are 0.
    """
    if isinstance(value, dict):
        value = value.get("totalCount")
    if value is None:
        return 0
    return max(int(value), 0)


@dataclass(frozen=True)
class RepositorySummary:
    """One repository node of the fork network."""

    name_with_owner: str
    url: str
    pushed_at: Optional[datetime.datetime] = None
    stargazer_count: int = 0
    issue_count: int = 0
    pull_request_count: int = 0
    fork_count: int = 0

    @property
    def owner(self) -> str:
        return self.name_with_owner.split("/")[0]

    @classmethod
    def from_graphql(cls, node: Dict[str, Any]) -> "RepositorySummary":
        """Build a summary from a ``repoParts`` GraphQL node."""
        return cls(
            name_with_owner=node["nameWithOwner"],
            url=node.get("url") or "",
            pushed_at=parse_timestamp(node.get("pushedAt")),
            stargazer_count=normalize_count(
                node.get("stargazers", node.get("stargazerCount"))
            ),
            issue_count=normalize_count(node.get("issues")),
            pull_request_count=normalize_count(node.get("pullRequests")),
            fork_count=normalize_count(node.get("forks", node.get("forkCount"))),
        )


@dataclass(frozen=True)
class ForkNetworkView:
    """
    The queried repository together with its parent and top forks.

    Attributes:
        repository: The repository that was asked for
        parent: The repository it was forked from, if any
        forks: Up to the requested number of forks, most-starred first
        fork_total: Total fork count reported by GitHub
    """

    repository: RepositorySummary
    parent: Optional[RepositorySummary] = None
    forks: Tuple[RepositorySummary, ...] = field(default_factory=tuple)
    fork_total: int = 0

    @property
    def remaining_forks(self) -> int:
        """Forks that exist but were not fetched."""
        return max(self.fork_total - len(self.forks), 0)

    @classmethod
    def from_graphql(cls, repository: Dict[str, Any]) -> "ForkNetworkView":
        """Build the view from the ``repository`` object of the query response."""
        forks_data = repository.get("forks") or {}
        parent_data = repository.get("parent")

        return cls(
            repository=RepositorySummary.from_graphql(repository),
            parent=RepositorySummary.from_graphql(parent_data) if parent_data else None,
            forks=tuple(
                RepositorySummary.from_graphql(node) for node in forks_data.get("nodes") or []
            ),
            fork_total=normalize_count(forks_data),
        )
