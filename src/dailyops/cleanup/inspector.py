"""BranchInspector - Works out which local branches are safe to remove."""

from __future__ import annotations

import logging

from dailyops.cleanup.exceptions import DefaultBranchError
from dailyops.cleanup.git import GitClient

logger = logging.getLogger("dailyops.cleanup.inspector")

# Local names tried, in order, when the remote does not advertise a default.
FALLBACK_DEFAULT_BRANCHES = ("main", "master")


class BranchInspector:
    """Answers questions about local branches on top of a GitClient."""

    def __init__(self, git: GitClient) -> None:
        self.git = git

    def default_branch(self) -> str:
        """Determine the repository's default branch.

        Uses the remote's advertised HEAD branch, then the first local
        branch found among FALLBACK_DEFAULT_BRANCHES.

        Returns:
            Default branch name.

        Raises:
            DefaultBranchError: If nothing resolves.
        """
        remote_head = self.git.remote_head_branch()
        if remote_head:
            logger.debug("Remote HEAD branch is %s", remote_head)
            return remote_head

        for name in FALLBACK_DEFAULT_BRANCHES:
            if self.git.branch_exists(name):
                logger.debug("Falling back to local branch %s", name)
                return name

        raise DefaultBranchError("Could not determine default branch!")

    def list_local_branches(self) -> list[str]:
        """List all local branches, in git's order."""
        return self.git.local_branches()

    def non_default_branches(self, default_branch: str) -> list[str]:
        """List local branches other than the default branch."""
        return [b for b in self.list_local_branches() if b != default_branch]

    def merged_local_branches(self, default_branch: str) -> list[str]:
        """List branches fully merged into the default branch.

        The default branch and the checked-out branch are never included.
        """
        current = self.git.current_branch()
        excluded = {default_branch, current}
        merged = [b for b in self.git.merged_branches(default_branch) if b not in excluded]
        logger.info("%d branch(es) merged into %s", len(merged), default_branch)
        return merged
