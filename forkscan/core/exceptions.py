"""Exception hierarchy for forkscan."""

from typing import List, Optional


class ForkScanError(Exception):
    pass


class ConfigurationError(ForkScanError):
    pass


class InvalidRepositoryError(ForkScanError):
    def __init__(self, value: str):
        super().__init__(
            f"Invalid repository '{value}'. Use 'owner/repo' or a full GitHub URL."
        )
        self.value = value


class GitHubAPIError(ForkScanError):
    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        errors: Optional[List[dict]] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.errors = errors or []
