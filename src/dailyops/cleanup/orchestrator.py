"""CleanupOrchestrator - Cross-checks local branches against merged PRs."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from dailyops.cleanup.exceptions import GitCommandError
from dailyops.cleanup.inspector import BranchInspector
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

if TYPE_CHECKING:
    from dailyops.cleanup.git import GitClient
    from dailyops.cleanup.github import GitHubCLI
    from dailyops.config import CleanupConfig

logger = logging.getLogger("dailyops.cleanup")


class CleanupOrchestrator:
    """Coordinates git and GitHub for every menu action.

    The cleanup workflow runs sync, identify, cross-check, confirm and
    execute. Deletions are independent: one failure does not undo or stop
    the others.
    """

    def __init__(self, git: GitClient, github: GitHubCLI, config: CleanupConfig) -> None:
        """Initialize the orchestrator.

        Args:
            git: Local git client.
            github: GitHub CLI wrapper.
            config: Limits for PR listings.
        """
        self.git = git
        self.github = github
        self.config = config
        self.inspector = BranchInspector(git)

    def recent_merged_prs(self, limit: int | None = None) -> list[PullRequest]:
        """Most recently merged PRs."""
        return self.github.merged_prs(limit=limit or self.config.pr_list_limit)

    def check_branch(self, branch: str) -> BranchCheck:
        """Report whether a branch exists locally and has merged PRs."""
        return BranchCheck(
            branch=branch,
            exists_locally=self.git.branch_exists(branch),
            pull_requests=self.github.merged_prs(head=branch),
        )

    def local_branches_with_prs(self) -> LocalPRScan:
        """Find non-default local branches that have a merged PR.

        Returns:
            LocalPRScan with every checked branch and the ones that matched.
        """
        default_branch = self.inspector.default_branch()
        branches = self.inspector.non_default_branches(default_branch)
        matches = []
        for branch in branches:
            prs = self.github.merged_prs(head=branch)
            if prs:
                matches.append(CleanupCandidate(branch=branch, pull_requests=prs))
        return LocalPRScan(
            default_branch=default_branch, checked_branches=branches, matches=matches
        )

    def prepare_cleanup(self) -> tuple[str, list[CleanupCandidate]]:
        """Sync the default branch and list deletion candidates.

        Every candidate is merged locally; the PR lookup only decides
        whether it is labeled confirmed or unconfirmed.

        Returns:
            The default branch and the candidates, in git's order.

        Raises:
            GitCommandError: If checkout or pull fails.
        """
        default_branch = self.inspector.default_branch()

        self.git.checkout(default_branch)
        self.git.pull(default_branch)

        candidates = [
            CleanupCandidate(branch=branch, pull_requests=self.github.merged_prs(head=branch))
            for branch in self.inspector.merged_local_branches(default_branch)
        ]
        logger.info(
            "%d cleanup candidate(s), %d confirmed by a merged PR",
            len(candidates),
            sum(1 for c in candidates if c.confirmed),
        )
        return default_branch, candidates

    def execute_cleanup(self, candidates: list[CleanupCandidate]) -> list[BranchDeletion]:
        """Delete each candidate branch with a non-forcing delete.

        Returns:
            One outcome per candidate, in order.
        """
        deletions = []
        for candidate in candidates:
            try:
                self.git.delete_branch(candidate.branch)
            except GitCommandError as e:
                logger.warning("Could not delete %s: %s", candidate.branch, e.stderr)
                error = e.stderr or str(e)
                deletions.append(
                    BranchDeletion(branch=candidate.branch, deleted=False, error=error)
                )
            else:
                deletions.append(BranchDeletion(branch=candidate.branch, deleted=True))
        return deletions

    def cleanup(self, confirm: Callable[[list[CleanupCandidate]], bool]) -> CleanupReport:
        """Run the full cleanup workflow.

        Args:
            confirm: Shown the candidates; returns True to delete them all.

        Returns:
            CleanupReport; CANCELLED means nothing was deleted.
        """
        default_branch, candidates = self.prepare_cleanup()
        if not candidates:
            return CleanupReport(status=CleanupStatus.NOTHING_TO_DO, default_branch=default_branch)

        if not confirm(candidates):
            logger.info("Cleanup cancelled by user")
            return CleanupReport(
                status=CleanupStatus.CANCELLED,
                default_branch=default_branch,
                candidates=candidates,
            )

        deletions = self.execute_cleanup(candidates)
        report = CleanupReport(
            status=CleanupStatus.COMPLETED,
            default_branch=default_branch,
            candidates=candidates,
            deletions=deletions,
        )
        logger.info(
            "Cleanup completed: %d deleted, %d failed",
            len(deletions) - len(report.failed),
            len(report.failed),
        )
        return report

    def update_and_prune(self) -> tuple[str, str]:
        """Fetch with prune, then check out and pull the default branch.

        Returns:
            The default branch and the prune dry-run output.
        """
        default_branch = self.inspector.default_branch()
        self.git.fetch_prune()
        pruned = self.git.remote_prune_dry_run()
        self.git.checkout(default_branch)
        self.git.pull(default_branch)
        return default_branch, pruned

    def branch_summary(self) -> BranchSummary:
        """Collect the current branch, local branches and recent merges."""
        default_branch = self.inspector.default_branch()
        return BranchSummary(
            current_branch=self.git.current_branch(),
            default_branch=default_branch,
            local_branches=self.inspector.list_local_branches(),
            recent_pull_requests=self.github.merged_prs(limit=self.config.summary_pr_limit),
        )
