"""Branch cleanup - Removes local branches that were merged, checked against GitHub PRs."""

from dailyops.cleanup.exceptions import (
    CleanupError,
    DefaultBranchError,
    GitCommandError,
    GitHubCLIError,
    PrerequisiteError,
)
from dailyops.cleanup.git import GitClient
from dailyops.cleanup.github import GitHubCLI
from dailyops.cleanup.inspector import BranchInspector
from dailyops.cleanup.menu import MenuLoop
from dailyops.cleanup.models import (
    BranchCheck,
    BranchDeletion,
    BranchSummary,
    CleanupCandidate,
    CleanupReport,
    CleanupStatus,
    LocalPRScan,
    PullRequest,
)
from dailyops.cleanup.orchestrator import CleanupOrchestrator
from dailyops.cleanup.prereqs import check_all

__all__ = [
    "BranchCheck",
    "BranchDeletion",
    "BranchInspector",
    "BranchSummary",
    "CleanupCandidate",
    "CleanupError",
    "CleanupOrchestrator",
    "CleanupReport",
    "CleanupStatus",
    "DefaultBranchError",
    "GitClient",
    "GitCommandError",
    "GitHubCLI",
    "GitHubCLIError",
    "LocalPRScan",
    "MenuLoop",
    "PrerequisiteError",
    "PullRequest",
    "check_all",
]
