"""Parsing of repository identifiers given on the command line."""

import re
from typing import Tuple

from forkscan.core.exceptions import InvalidRepositoryError

_URL_PREFIX = re.compile(r"^https?://(www\.)?github\.com/", re.IGNORECASE)


def parse_repo_identifier(value: str) -> Tuple[str, str]:
    """
    Split ``owner/repo`` (optionally a full GitHub URL) into its parts.

    Args:
        value: Repository identifier, e.g. "octocat/hello-world" or
            "https://github.com/octocat/hello-world"

    Returns:
        Tuple[str, str]: (owner, name)

    Raises:
        InvalidRepositoryError: Unless exactly two non-empty segments remain
    """
    nwo, is_url = _URL_PREFIX.subn("", (value or "").strip())
    if is_url:
        nwo = nwo.rstrip("/")

    parts = nwo.split("/")
    if len(parts) != 2 or not all(parts):
        raise InvalidRepositoryError(value)

    owner, name = parts
    if name.endswith(".git"):
        name = name[: -len(".git")]
        if not name:
            raise InvalidRepositoryError(value)

    return owner, name
