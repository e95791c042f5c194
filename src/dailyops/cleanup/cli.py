"""CLI entry point for the interactive branch cleanup tool.

Compares local branches with merged GitHub PRs and helps clean them up.
All interaction happens through the numbered menu.
"""

from __future__ import annotations

import sys

import click

from dailyops.cleanup.exceptions import PrerequisiteError
from dailyops.cleanup.git import GitClient
from dailyops.cleanup.github import GitHubCLI
from dailyops.cleanup.menu import MenuLoop
from dailyops.cleanup.orchestrator import CleanupOrchestrator
from dailyops.cleanup.prereqs import check_all
from dailyops.config import CleanupConfig
from dailyops.logging import setup_logging
from dailyops.prompts import ClickPrompter


@click.command()
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output",
)
@click.version_option(package_name="dailyops")
def main(verbose: bool) -> None:
    """Interactively clean up local branches whose PRs were merged."""
    setup_logging(level="DEBUG" if verbose else None, console=verbose)

    config = CleanupConfig()
    git = GitClient(repo_path=config.repo_path, remote=config.remote)
    github = GitHubCLI(repo_path=config.repo_path)

    try:
        check_all(git, github)
    except PrerequisiteError as e:
        click.secho(str(e), fg="red", err=True)
        sys.exit(1)

    menu = MenuLoop(CleanupOrchestrator(git, github, config), ClickPrompter())
    sys.exit(menu.run())


if __name__ == "__main__":
    main()
