"""Stand-up generator - Builds a daily stand-up message from Linear tickets."""

from dailyops.standup.assembler import assemble, build_work_item, build_work_items
from dailyops.standup.credentials import CREDENTIAL_KEY, CredentialStore
from dailyops.standup.exceptions import (
    ClipboardUnavailableError,
    CredentialError,
    IssueNotFoundError,
    IssueTrackerError,
    NoTasksError,
    StandupError,
)
from dailyops.standup.generator import StandupGenerator
from dailyops.standup.linear import IssueTrackerClient, LinearClient
from dailyops.standup.models import (
    FreeTextLine,
    StandupMessage,
    StandupResult,
    TaskLine,
    TicketLine,
    WorkItem,
)
from dailyops.standup.tasks import TICKET_PATTERN, classify_line, read_task_file

__all__ = [
    "CREDENTIAL_KEY",
    "TICKET_PATTERN",
    "ClipboardUnavailableError",
    "CredentialError",
    "CredentialStore",
    "FreeTextLine",
    "IssueNotFoundError",
    "IssueTrackerClient",
    "IssueTrackerError",
    "LinearClient",
    "NoTasksError",
    "StandupError",
    "StandupGenerator",
    "StandupMessage",
    "StandupResult",
    "TaskLine",
    "TicketLine",
    "WorkItem",
    "assemble",
    "build_work_item",
    "build_work_items",
    "classify_line",
    "read_task_file",
]
