"""Constants used across the forkscan package."""

# GitHub API constants
GITHUB_WEB_URL = "https://github.com/"
GITHUB_GRAPHQL_URL = "https://api.github.com/graphql"
GITHUB_TOKEN_ENV = "GITHUB_TOKEN"
TOKEN_HELP_URL = (
    "https://help.github.com/articles/creating-a-personal-access-token-for-the-command-line/"
)

# Number of forks requested per query (most-starred first)
FORKS_PAGE_SIZE = 30

# Report layout
EMPTY_COUNT = "-"
PULL_REQUESTS_COLUMN_WIDTH = 10
HORIZONTAL_RULE_CHAR = "─"
