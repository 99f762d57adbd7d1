"""Exception hierarchy for repo-info.

Lower layers raise these; the CLI turns any of them into the one
user-facing error message and a non-zero exit code.
"""


class RepoInfoError(Exception):
    """Base exception for the entire application."""


class InvalidRepositoryError(RepoInfoError):
    """The repository identifier is not of the form ``owner/name``."""


class FetchError(RepoInfoError):
    """A GitHub API call failed (transport, status, or payload shape)."""
