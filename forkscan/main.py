"""Fork network report for forkscan."""

import datetime
import logging
import sys
from typing import List, Optional, TextIO

from forkscan.core.constants import EMPTY_COUNT, PULL_REQUESTS_COLUMN_WIDTH
from forkscan.core.models import ForkNetworkView, RepositorySummary
from forkscan.utils.date_utils import relative_date
from forkscan.utils.table import Column, render_table

logger = logging.getLogger(__name__)

COLUMNS = [
    Column("Owner"),
    Column("Last Push", align="right"),
    Column("Stars", align="right"),
    Column("Issues", align="right"),
    Column("Pull Requests", align="center", width=PULL_REQUESTS_COLUMN_WIDTH, wrap=True),
    Column("Forks", align="right"),
    Column("Homepage"),
]

_NEVER_PUSHED = datetime.datetime.min.replace(tzinfo=datetime.timezone.utc)


def format_count(count: int) -> str:
    """Render a count, using a dash for zero."""
    return str(count) if count > 0 else EMPTY_COUNT


def ranking_key(repo: RepositorySummary):
    return (repo.stargazer_count, repo.pushed_at or _NEVER_PUSHED)


class ForkReport:
    """
    Ranked table of a repository's fork network.

    Rows are the parent (if any), the repository itself and its fetched
    forks, most-starred first with the most recent push breaking ties.
    """

    def __init__(self, network: ForkNetworkView, now: Optional[datetime.datetime] = None):
        """
        Args:
            network: Fetched fork network
            now: Reference time for relative dates (defaults to current time)
        """
        self.network = network
        self.now = now

    def build_rows(self) -> List[RepositorySummary]:
        repos = [self.network.repository, *self.network.forks]
        if self.network.parent:
            repos.insert(0, self.network.parent)
        return sorted(repos, key=ranking_key, reverse=True)

    def format_row(self, repo: RepositorySummary) -> List[str]:
        return [
            repo.owner,
            relative_date(repo.pushed_at, now=self.now),
            format_count(repo.stargazer_count),
            format_count(repo.issue_count),
            format_count(repo.pull_request_count),
            format_count(repo.fork_count),
            repo.url,
        ]

    def render_table(self) -> str:
        return render_table(COLUMNS, [self.format_row(repo) for repo in self.build_rows()])

    def notes(self) -> List[str]:
        """Summary lines printed after the table."""
        lines = []
        network = self.network

        if network.remaining_forks > 0:
            lines.append(f"...and {network.remaining_forks} more.")

        if network.parent:
            additional_forks = network.parent.fork_count - 1
            suffix = ""
            if additional_forks > 0:
                suffix = f", which has {additional_forks} additional forks (not shown)"
            lines.append(
                f"{network.repository.name_with_owner} is a fork of "
                f"{network.parent.name_with_owner}{suffix}."
            )

        return lines

    def generate_report(self) -> str:
        logger.debug(
            f"Rendering report for {self.network.repository.name_with_owner} "
            f"({len(self.network.forks)} forks)"
        )
        return "\n".join([self.render_table(), *self.notes()])

    def print_report(self, stream: Optional[TextIO] = None) -> None:
        print(self.generate_report(), file=stream or sys.stdout)
