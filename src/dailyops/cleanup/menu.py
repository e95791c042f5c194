"""MenuLoop - The interactive numbered menu of the branch cleanup tool."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from dailyops.cleanup.exceptions import CleanupError
from dailyops.cleanup.models import CleanupCandidate, CleanupStatus
from dailyops.cleanup.render import format_pr_detail, format_pr_line, format_pr_short

if TYPE_CHECKING:
    from dailyops.cleanup.orchestrator import CleanupOrchestrator
    from dailyops.prompts import Prompter

logger = logging.getLogger("dailyops.cleanup.menu")

EXIT_CHOICE = "7"

MENU_ITEMS = (
    ("1", "List all merged PRs"),
    ("2", "Check specific branch against merged PRs"),
    ("3", "List local branches that have merged PRs"),
    ("4", "Clean up merged local branches (safe)"),
    ("5", "Update from remote and prune"),
    ("6", "Show branch status summary"),
    (EXIT_CHOICE, "Exit"),
)


class MenuLoop:
    """Shows the menu, runs the chosen action and waits for Enter.

    Errors from an action are reported and the menu is shown again; only
    the exit option leaves the loop.
    """

    def __init__(self, orchestrator: CleanupOrchestrator, prompter: Prompter) -> None:
        self.orchestrator = orchestrator
        self.prompter = prompter
        self.actions: dict[str, Callable[[], None]] = {
            "1": self.list_merged_prs,
            "2": self.check_specific_branch,
            "3": self.list_local_merged_branches,
            "4": self.cleanup_merged_branches,
            "5": self.update_and_prune,
            "6": self.show_branch_summary,
        }

    def run(self) -> int:
        """Run until the user picks exit.

        Returns:
            Process exit status.
        """
        self.prompter.echo("🚀  Interactive Branch Cleanup Tool", color="blue")
        while True:
            self.show_menu()
            choice = self.prompter.text(f"Choose an option (1-{EXIT_CHOICE}):")
            if choice == EXIT_CHOICE:
                self.prompter.echo("👋  Goodbye!", color="green")
                return 0

            self.dispatch(choice)
            self.prompter.pause()

    def show_menu(self) -> None:
        self.prompter.echo("\n=== Branch Cleanup Menu ===", color="blue")
        for key, label in MENU_ITEMS:
            self.prompter.echo(f"{key}. {label}")

    def dispatch(self, choice: str) -> None:
        """Run the action for a menu choice, reporting its errors."""
        action = self.actions.get(choice)
        if action is None:
            self.prompter.echo(f"Invalid option! Please choose 1-{EXIT_CHOICE}.", color="red")
            return

        logger.info("Menu action %s", choice)
        try:
            action()
        except CleanupError as e:
            logger.error("Menu action %s failed: %s", choice, e)
            self.prompter.echo(str(e), color="red", err=True)

    def list_merged_prs(self) -> None:
        self.prompter.echo("\n📋  Recent merged PRs:", color="green")
        for pr in self.orchestrator.recent_merged_prs():
            self.prompter.echo(format_pr_detail(pr))
            self.prompter.echo()

    def check_specific_branch(self) -> None:
        branch = self.prompter.text("Enter branch name to check:")
        if not branch:
            self.prompter.echo("Branch name cannot be empty!", color="red")
            return

        check = self.orchestrator.check_branch(branch)
        if check.exists_locally:
            self.prompter.echo(f"Branch '{branch}' exists locally.", color="green")
        else:
            self.prompter.echo(f"Branch '{branch}' doesn't exist locally.", color="yellow")

        if check.pull_requests:
            self.prompter.echo(f"✅  Found merged PR for '{branch}':", color="green")
            for pr in check.pull_requests:
                self.prompter.echo(format_pr_line(pr))
        else:
            self.prompter.echo(f"❌  No merged PR found for '{branch}'", color="yellow")

    def list_local_merged_branches(self) -> None:
        self.prompter.echo("\n🔍  Checking local branches against merged PRs...", color="green")
        scan = self.orchestrator.local_branches_with_prs()
        if not scan.checked_branches:
            self.prompter.echo(
                f"No local branches found (other than {scan.default_branch})", color="yellow"
            )
            return

        self.prompter.echo("\nLocal branches with merged PRs:", color="blue")
        if not scan.matches:
            self.prompter.echo("No local branches have merged PRs", color="yellow")
            return
        for candidate in scan.matches:
            details = "; ".join(format_pr_short(pr) for pr in candidate.pull_requests)
            self.prompter.echo(f"  ✅  {candidate.branch} -> {details}", color="green")

    def cleanup_merged_branches(self) -> None:
        self.prompter.echo("\n🧹  Safe cleanup of merged branches...", color="green")
        report = self.orchestrator.cleanup(confirm=self._confirm_deletion)

        if report.status is CleanupStatus.NOTHING_TO_DO:
            self.prompter.echo("No merged branches to clean up", color="yellow")
        elif report.status is CleanupStatus.CANCELLED:
            self.prompter.echo("Cleanup cancelled.", color="yellow")
        else:
            for deletion in report.deletions:
                if deletion.deleted:
                    self.prompter.echo(f"Deleted {deletion.branch}", color="green")
                else:
                    self.prompter.echo(
                        f"Could not delete {deletion.branch}: {deletion.error}", color="red"
                    )
            if report.failed:
                self.prompter.echo(
                    f"⚠️  Cleanup finished with {len(report.failed)} failure(s); "
                    "re-run to retry the remaining branches.",
                    color="yellow",
                )
            else:
                self.prompter.echo("✅  Cleanup complete!", color="green")

    def _confirm_deletion(self, candidates: list[CleanupCandidate]) -> bool:
        self.prompter.echo("\nBranches that appear to be merged:", color="blue")
        for candidate in candidates:
            marker = "✅ " if candidate.confirmed else "⚠️ "
            self.prompter.echo(f"  {marker} {candidate.branch} {candidate.label}")
        return self.prompter.confirm("\nDelete these branches? (y/N):")

    def update_and_prune(self) -> None:
        self.prompter.echo("\n🔄  Updating from remote and pruning...", color="green")
        default_branch, pruned = self.orchestrator.update_and_prune()
        self.prompter.echo("Remote tracking branches that were pruned:", color="blue")
        self.prompter.echo(pruned or "  (none)")
        self.prompter.echo(f"Switched to {default_branch} and pulled.", color="blue")
        self.prompter.echo("✅  Update complete!", color="green")

    def show_branch_summary(self) -> None:
        self.prompter.echo("\n📊  Branch Status Summary", color="green")
        summary = self.orchestrator.branch_summary()

        self.prompter.echo("\nCurrent branch:", color="blue")
        self.prompter.echo(summary.current_branch or "(detached HEAD)")

        self.prompter.echo("\nLocal branches:", color="blue")
        for branch in summary.local_branches:
            if branch == summary.default_branch:
                self.prompter.echo(f"  🏠  {branch} (default)")
            else:
                self.prompter.echo(f"  📝  {branch}")

        limit = self.orchestrator.config.summary_pr_limit
        self.prompter.echo(f"\nRecent merged PRs (last {limit}):", color="blue")
        for pr in summary.recent_pull_requests:
            self.prompter.echo(f"  - PR #{pr.number}: {pr.title} ({pr.head_branch})")
