"""Exceptions raised while fetching pull request data from GitHub."""


class TriageError(Exception):
    """Base class for errors raised by the PR triage tool."""


class InvalidRepositoryError(TriageError):
    """Raised when a repository argument cannot be parsed."""


class RepositoryNotFoundError(TriageError):
    """Raised when the repository does not exist or is not accessible."""


class GitHubAccessError(TriageError):
    """Raised on 403 responses (rate limited or insufficient permissions)."""
