"""Custom exceptions for the branch cleanup tool."""


class CleanupError(Exception):
    """Base exception for branch cleanup errors."""


class PrerequisiteError(CleanupError):
    """A required tool, login or repository is missing."""


class GitCommandError(CleanupError):
    """A git command failed."""

    def __init__(self, message: str, stderr: str = "") -> None:
        super().__init__(message)
        self.stderr = stderr


class DefaultBranchError(GitCommandError):
    """Could not determine the repository's default branch."""


class GitHubCLIError(CleanupError):
    """A GitHub CLI command failed or returned unreadable output."""
