"""Startup checks for the branch cleanup tool."""

from __future__ import annotations

import logging

from dailyops.cleanup.exceptions import PrerequisiteError
from dailyops.cleanup.git import GitClient
from dailyops.cleanup.github import GitHubCLI

logger = logging.getLogger("dailyops.cleanup.prereqs")

INSTALL_INSTRUCTIONS = """GitHub CLI (gh) is not installed!
Please install it first:
  macOS: brew install gh
  Ubuntu/Debian: sudo apt install gh
  Windows: winget install GitHub.cli
  Or visit: https://cli.github.com/"""

LOGIN_INSTRUCTIONS = """You're not authenticated with GitHub CLI!
Please authenticate first:
  gh auth login"""


def check_all(git: GitClient, github: GitHubCLI) -> None:
    """Verify gh is installed and logged in and we are inside a repository.

    Checks run in that order and stop at the first failure.

    Raises:
        PrerequisiteError: With instructions for the failed check.
    """
    if not github.is_installed():
        raise PrerequisiteError(INSTALL_INSTRUCTIONS)
    if not github.is_authenticated():
        raise PrerequisiteError(LOGIN_INSTRUCTIONS)
    if not git.is_inside_work_tree():
        raise PrerequisiteError("Not in a git repository!")
    logger.info("Prerequisites satisfied")
