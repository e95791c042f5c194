"""CLI entry point for the stand-up generator.

Reads `tickets.md`, resolves ticket titles through Linear and copies the
finished stand-up message to the clipboard.
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from dailyops.config import StandupConfig
from dailyops.logging import setup_logging
from dailyops.prompts import ClickPrompter
from dailyops.standup.exceptions import StandupError
from dailyops.standup.generator import StandupGenerator


@click.command()
@click.option(
    "--env-file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Credential file holding LINEAR_API_KEY (default: ./.env)",
)
@click.option(
    "--tickets-file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Task file with one ticket or task per line (default: ./tickets.md)",
)
@click.option(
    "--print",
    "print_only",
    is_flag=True,
    help="Print the message instead of copying it to the clipboard",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output",
)
@click.version_option(package_name="dailyops")
def main(
    env_file: Path | None,
    tickets_file: Path | None,
    print_only: bool,
    verbose: bool,
) -> None:
    """Generate a daily stand-up message from Linear tickets."""
    setup_logging(level="DEBUG" if verbose else None, console=verbose)

    config = StandupConfig.from_env(env_file=env_file, tickets_file=tickets_file)
    generator = StandupGenerator(
        config=config,
        prompter=ClickPrompter(),
        use_clipboard=not print_only,
    )

    try:
        generator.run()
    except StandupError as e:
        click.secho(f"❌ Error: {e}", fg="red", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
