"""GitHubCLI - Queries merged pull requests through the `gh` command."""

from __future__ import annotations

import json
import logging
import shutil
import subprocess
from pathlib import Path

from pydantic import ValidationError

from dailyops.cleanup.exceptions import GitHubCLIError
from dailyops.cleanup.models import PullRequest

logger = logging.getLogger("dailyops.cleanup.github")

PR_FIELDS = "number,title,headRefName,mergedAt,author"
DEFAULT_PR_LIMIT = 30


class GitHubCLI:
    """Wrapper around the GitHub CLI for the current repository.

    Results are never cached: each call runs `gh` again.
    """

    def __init__(self, repo_path: str | Path = ".", executable: str = "gh") -> None:
        """Initialize the GitHub CLI wrapper.

        Args:
            repo_path: Directory of the repository gh should target.
            executable: Name or path of the gh binary.
        """
        self.repo_path = Path(repo_path)
        self.executable = executable

    def _run_gh(self, *args: str) -> subprocess.CompletedProcess[str]:
        logger.debug("gh %s", " ".join(args))
        return subprocess.run(
            [self.executable, *args],
            cwd=self.repo_path,
            capture_output=True,
            text=True,
            check=False,
        )

    def is_installed(self) -> bool:
        """Return True if the gh binary is on PATH."""
        return shutil.which(self.executable) is not None

    def is_authenticated(self) -> bool:
        """Return True if `gh auth status` reports a logged-in session."""
        try:
            result = self._run_gh("auth", "status")
        except OSError:
            return False
        return result.returncode == 0

    def merged_prs(
        self, limit: int = DEFAULT_PR_LIMIT, head: str | None = None
    ) -> list[PullRequest]:
        """List merged pull requests, newest first.

        Args:
            limit: Maximum number of PRs to return.
            head: Only PRs whose head branch is exactly this name.

        Returns:
            Merged pull requests.

        Raises:
            GitHubCLIError: If gh fails or prints something unexpected.
        """
        args = ["pr", "list", "--state", "merged", "--limit", str(limit), "--json", PR_FIELDS]
        if head is not None:
            args += ["--head", head]

        try:
            result = self._run_gh(*args)
        except OSError as e:
            raise GitHubCLIError(f"Could not run {self.executable}: {e}") from e

        if result.returncode != 0:
            stderr = result.stderr.strip()
            logger.error("gh pr list failed: %s", stderr)
            raise GitHubCLIError(f"Failed to list merged PRs: {stderr}")

        try:
            payload = json.loads(result.stdout or "[]")
            prs = [PullRequest.model_validate(item) for item in payload]
        except (ValueError, TypeError, ValidationError) as e:
            logger.error("Unreadable gh output: %s", result.stdout[:500])
            raise GitHubCLIError(f"Unexpected output from gh pr list: {e}") from e

        if head is not None:
            prs = [pr for pr in prs if pr.head_branch == head]
        logger.debug("Found %d merged PR(s) (head=%s)", len(prs), head)
        return prs
