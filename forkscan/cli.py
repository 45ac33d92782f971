"""Command-line interface for forkscan."""

import sys
import argparse
import logging
from typing import List, NoReturn, Optional

from forkscan import __version__
from forkscan.api.github_api import GitHubAPI
from forkscan.core.config import Settings
from forkscan.core.exceptions import ForkScanError, InvalidRepositoryError
from forkscan.main import ForkReport
from forkscan.utils.repo_utils import parse_repo_identifier

logging.basicConfig(
    level=logging.WARNING, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger("forkscan")


def die(message) -> NoReturn:
    """Print a single-line error to stderr and exit with a failure status."""
    print(message, file=sys.stderr)
    sys.exit(1)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="forkscan",
        description="Print info about the forks of a GitHub repository",
    )
    parser.add_argument(
        "owner_repo",
        metavar="owner/repo",
        help="GitHub repository in format 'owner/repo' or full URL",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose DEBUG logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Command-line entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logger.setLevel(logging.DEBUG)
        logging.getLogger("urllib3").setLevel(logging.INFO)

    try:
        settings = Settings.from_env()
    except ForkScanError as e:
        die(str(e))

    try:
        owner, name = parse_repo_identifier(args.owner_repo)
    except InvalidRepositoryError as e:
        die(f"{e} {parser.format_usage().strip()}")

    logger.info(f"Fetching fork network for {owner}/{name}")
    try:
        with GitHubAPI.from_settings(settings) as github_api:
            network = github_api.get_fork_network(owner, name, first=settings.forks_limit)
    except ForkScanError as e:
        die(str(e) or repr(e))

    ForkReport(network).print_report()


if __name__ == "__main__":
    main()
