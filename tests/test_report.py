import datetime
import io
import unittest

from forkscan.core.models import ForkNetworkView, RepositorySummary
from forkscan.main import ForkReport, format_count

NOW = datetime.datetime(2024, 6, 15, 12, 0, 0, tzinfo=datetime.timezone.utc)


def summary(name_with_owner, stars=0, days_ago=1, **counts):
    return RepositorySummary(
        name_with_owner=name_with_owner,
        url=f"https://github.com/{name_with_owner}",
        pushed_at=NOW - datetime.timedelta(days=days_ago),
        stargazer_count=stars,
        **counts,
    )


class TestFormatCount(unittest.TestCase):
    def test_zero_is_dash(self):
        self.assertEqual(format_count(0), "-")

    def test_positive_is_decimal(self):
        self.assertEqual(format_count(1), "1")
        self.assertEqual(format_count(1234), "1234")


class TestForkReport(unittest.TestCase):
    def test_lone_repository(self):
        report = ForkReport(ForkNetworkView(repository=summary("octocat/solo")), now=NOW)

        self.assertEqual([r.name_with_owner for r in report.build_rows()], ["octocat/solo"])
        self.assertEqual(report.notes(), [])

        lines = report.generate_report().splitlines()
        self.assertEqual(len(lines), 4)  # wrapped header, rule, one row
        self.assertTrue(lines[2].startswith("─"))
        self.assertTrue(lines[3].startswith("octocat "))

    def test_ranking_stars_then_recent_push(self):
        network = ForkNetworkView(
            repository=summary("me/project", stars=5, days_ago=10),
            parent=summary("upstream/project", stars=100, days_ago=30, fork_count=3),
            forks=(
                summary("a/project", stars=10, days_ago=50),
                summary("b/project", stars=5, days_ago=2),
                summary("c/project", stars=0, days_ago=1),
            ),
            fork_total=3,
        )
        rows = ForkReport(network, now=NOW).build_rows()
        self.assertEqual(
            [r.owner for r in rows], ["upstream", "a", "b", "me", "c"]
        )

    def test_never_pushed_sorts_last_among_ties(self):
        never = RepositorySummary(name_with_owner="n/project", url="u", stargazer_count=1)
        network = ForkNetworkView(
            repository=summary("me/project", stars=1),
            forks=(never,),
            fork_total=1,
        )
        rows = ForkReport(network, now=NOW).build_rows()
        self.assertEqual([r.owner for r in rows], ["me", "n"])

    def test_format_row(self):
        repo = summary("octocat/project", stars=3, days_ago=3, issue_count=0,
                       pull_request_count=7, fork_count=0)
        self.assertEqual(
            ForkReport(ForkNetworkView(repository=repo), now=NOW).format_row(repo),
            ["octocat", "3 days ago", "3", "-", "7", "-", "https://github.com/octocat/project"],
        )

    def test_more_forks_note(self):
        forks = tuple(summary(f"user{i}/project") for i in range(30))
        network = ForkNetworkView(repository=summary("me/project"), forks=forks, fork_total=45)
        self.assertEqual(ForkReport(network, now=NOW).notes(), ["...and 15 more."])

    def test_fork_of_note_with_siblings(self):
        network = ForkNetworkView(
            repository=summary("me/project"),
            parent=summary("upstream/project", fork_count=5),
        )
        self.assertEqual(
            ForkReport(network, now=NOW).notes(),
            [
                "me/project is a fork of upstream/project, "
                "which has 4 additional forks (not shown)."
            ],
        )

    def test_fork_of_note_without_siblings(self):
        network = ForkNetworkView(
            repository=summary("me/project"),
            parent=summary("upstream/project", fork_count=1),
        )
        self.assertEqual(
            ForkReport(network, now=NOW).notes(),
            ["me/project is a fork of upstream/project."],
        )

    def test_print_report(self):
        network = ForkNetworkView(
            repository=summary("me/project"),
            parent=summary("upstream/project", fork_count=2),
        )
        stream = io.StringIO()
        ForkReport(network, now=NOW).print_report(stream)

        output = stream.getvalue().splitlines()
        self.assertIn("Owner", output[0])
        self.assertEqual(
            output[-1],
            "me/project is a fork of upstream/project, which has 1 additional forks (not shown).",
        )
        self.assertEqual(sum(1 for line in output if line.startswith("─")), 1)


if __name__ == "__main__":
    unittest.main()
