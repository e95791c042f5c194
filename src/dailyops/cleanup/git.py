"""GitClient - Runs the local git commands used by the cleanup tool."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from dailyops.cleanup.exceptions import GitCommandError

logger = logging.getLogger("dailyops.cleanup.git")

BRANCH_FORMAT = "--format=%(refname:short)"
LOCAL_HEADS = "refs/heads/"


class GitClient:
    """Thin wrapper around the git command line.

    Every method runs in the configured repository directory. Branch
    listings read refs/heads/ through `for-each-ref`, so names come back
    without the markers of plain `git branch` and a detached HEAD is never
    listed as a branch.
    """

    def __init__(self, repo_path: str | Path = ".", remote: str = "origin") -> None:
        """Initialize the git client.

        Args:
            repo_path: Path inside the working tree.
            remote: Name of the remote to sync with.
        """
        self.repo_path = Path(repo_path)
        self.remote = remote

    def _run_git(self, *args: str) -> str:
        """Run a git command in the repo directory.

        Args:
            *args: Git command arguments

        Returns:
            Command stdout

        Raises:
            subprocess.CalledProcessError: If command fails
        """
        logger.debug("git %s", " ".join(args))
        result = subprocess.run(
            ["git", *args],
            cwd=self.repo_path,
            capture_output=True,
            text=True,
            check=True,
        )
        return result.stdout.strip()

    def _run_checked(self, action: str, *args: str) -> str:
        try:
            return self._run_git(*args)
        except subprocess.CalledProcessError as e:
            stderr = (e.stderr or "").strip()
            logger.error("Failed to %s: %s", action, stderr)
            raise GitCommandError(f"Failed to {action}: {stderr}", stderr=stderr) from e

    def _succeeds(self, *args: str) -> bool:
        try:
            self._run_git(*args)
        except (subprocess.CalledProcessError, OSError):
            return False
        return True

    def is_inside_work_tree(self) -> bool:
        """Return True if the repo path is inside a git repository."""
        return self._succeeds("rev-parse", "--git-dir")

    def remote_head_branch(self) -> str | None:
        """Return the default branch advertised by the remote, if any."""
        try:
            output = self._run_git("remote", "show", self.remote)
        except subprocess.CalledProcessError as e:
            logger.debug("git remote show %s failed: %s", self.remote, e.stderr)
            return None

        for line in output.splitlines():
            key, _, value = line.strip().partition(":")
            if key == "HEAD branch":
                name = value.strip()
                if name and name != "(unknown)":
                    return name
        return None

    def branch_exists(self, name: str) -> bool:
        """Return True if a local branch with this exact name exists."""
        return self._succeeds("show-ref", "--verify", "--quiet", f"refs/heads/{name}")

    def local_branches(self) -> list[str]:
        """List local branch names in git's order."""
        output = self._run_checked("list branches", "for-each-ref", BRANCH_FORMAT, LOCAL_HEADS)
        return [line.strip() for line in output.splitlines() if line.strip()]

    def current_branch(self) -> str:
        """Return the checked-out branch name (empty when detached)."""
        return self._run_checked("read current branch", "branch", "--show-current")

    def merged_branches(self, target: str) -> list[str]:
        """List local branches whose history is reachable from target."""
        output = self._run_checked(
            f"list branches merged into {target}",
            "for-each-ref",
            BRANCH_FORMAT,
            "--merged",
            target,
            LOCAL_HEADS,
        )
        return [line.strip() for line in output.splitlines() if line.strip()]

    def checkout(self, branch: str) -> None:
        logger.info("Checking out %s", branch)
        self._run_checked(f"check out '{branch}'", "checkout", branch)

    def pull(self, branch: str) -> str:
        logger.info("Pulling %s from %s", branch, self.remote)
        return self._run_checked(f"pull '{branch}'", "pull", self.remote, branch)

    def fetch_prune(self) -> str:
        logger.info("Fetching %s with prune", self.remote)
        return self._run_checked(f"fetch {self.remote}", "fetch", self.remote, "--prune")

    def remote_prune_dry_run(self) -> str:
        """Return the remote-tracking branches a prune would remove."""
        return self._run_checked(
            f"prune {self.remote}", "remote", "prune", self.remote, "--dry-run"
        )

    def delete_branch(self, branch: str) -> None:
        """Delete a local branch with `git branch -d`.

        git itself refuses when the branch is not fully merged.

        Raises:
            GitCommandError: If git refuses or fails.
        """
        logger.info("Deleting local branch %s", branch)
        self._run_checked(f"delete branch '{branch}'", "branch", "-d", branch)
        logger.info("Deleted local branch %s", branch)
