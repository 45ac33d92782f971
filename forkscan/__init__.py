"""forkscan - rank the forks of a GitHub repository."""

__version__ = "0.1.0"
