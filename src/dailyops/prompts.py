"""Interactive prompting shared by both tools."""

from __future__ import annotations

import re
from typing import Protocol

import click

# Only an explicit single-letter yes accepts; everything else declines.
CONFIRM_PATTERN = re.compile(r"^[Yy]$")


class Prompter(Protocol):
    """User interaction used by the stand-up generator and the cleanup menu."""

    def secret(self, message: str) -> str: ...

    def text(self, message: str) -> str: ...

    def confirm(self, message: str) -> bool: ...

    def pause(self, message: str = "Press Enter to continue...") -> None: ...

    def echo(self, message: str = "", color: str | None = None, err: bool = False) -> None: ...


class ClickPrompter:
    """Prompter backed by click, reading whole lines from stdin.

    Empty answers come back as empty strings instead of re-prompting.
    """

    def secret(self, message: str) -> str:
        value: str = click.prompt(
            message, default="", show_default=False, hide_input=True, prompt_suffix=" "
        )
        return value.strip()

    def text(self, message: str) -> str:
        value: str = click.prompt(message, default="", show_default=False, prompt_suffix=" ")
        return value.strip()

    def confirm(self, message: str) -> bool:
        answer: str = click.prompt(
            click.style(message, fg="yellow"),
            default="",
            show_default=False,
            prompt_suffix=" ",
        )
        return bool(CONFIRM_PATTERN.match(answer.strip()))

    def pause(self, message: str = "Press Enter to continue...") -> None:
        click.prompt(
            click.style(f"\n{message}", fg="yellow"),
            default="",
            show_default=False,
            prompt_suffix="",
        )

    def echo(self, message: str = "", color: str | None = None, err: bool = False) -> None:
        click.secho(message, fg=color, err=err)
