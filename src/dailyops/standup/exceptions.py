"""Custom exceptions for the stand-up generator."""


class StandupError(Exception):
    """Base exception for stand-up generator errors."""


class CredentialError(StandupError):
    """API key is missing, empty or could not be stored."""


class NoTasksError(StandupError):
    """Task file has no lines to report."""


class IssueTrackerError(StandupError):
    """Issue tracker request failed or returned errors."""


class IssueNotFoundError(IssueTrackerError):
    """Issue tracker returned no title for a ticket."""


class ClipboardUnavailableError(StandupError):
    """No clipboard command is available on this system."""
