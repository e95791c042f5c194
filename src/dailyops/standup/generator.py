"""StandupGenerator - Runs the stand-up flow end to end."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from dailyops.standup.assembler import assemble, build_work_items
from dailyops.standup.clipboard import copy_to_clipboard, find_clipboard_command
from dailyops.standup.credentials import CredentialStore
from dailyops.standup.exceptions import ClipboardUnavailableError
from dailyops.standup.linear import IssueTrackerClient, LinearClient
from dailyops.standup.models import StandupResult
from dailyops.standup.tasks import ensure_task_file, read_task_file, reset_task_file

if TYPE_CHECKING:
    from dailyops.config import StandupConfig
    from dailyops.prompts import Prompter

logger = logging.getLogger("dailyops.standup")

PLANS_PROMPT = "📝 What do you plan to work on?"
BLOCKERS_PROMPT = "🤔 Any blockers? (leave empty for 'None')"


def _default_client_factory(api_key: str, api_url: str) -> IssueTrackerClient:
    return LinearClient(api_key=api_key, api_url=api_url)


class StandupGenerator:
    """Builds the daily stand-up message from the task file.

    Steps, in order:
    - check that the output destination is usable
    - make sure an API key is stored
    - create the task file on first use and stop
    - resolve each task line in file order
    - ask for plans and blockers
    - publish the message, then reset the task file
    """

    def __init__(
        self,
        config: StandupConfig,
        prompter: Prompter,
        client_factory: Callable[[str, str], IssueTrackerClient] | None = None,
        publish: Callable[[str], None] | None = None,
        use_clipboard: bool = True,
    ) -> None:
        """Initialize the generator.

        Args:
            config: Resolved file locations and API endpoint.
            prompter: User interaction.
            client_factory: Builds an issue tracker client from
                (api_key, api_url). Defaults to LinearClient.
            publish: Receives the rendered message. Defaults to the
                clipboard, or printing when use_clipboard is False.
            use_clipboard: Whether the default publisher is the clipboard.
        """
        self.config = config
        self.prompter = prompter
        self.client_factory = client_factory or _default_client_factory
        self.use_clipboard = use_clipboard
        if publish is not None:
            self.publish = publish
        elif use_clipboard:
            self.publish = copy_to_clipboard
        else:
            self.publish = self._print_message

    def check_dependencies(self) -> None:
        """Fail early when the clipboard is the destination but unavailable.

        Raises:
            ClipboardUnavailableError: If no clipboard command is found.
        """
        if self.publish is copy_to_clipboard and find_clipboard_command() is None:
            raise ClipboardUnavailableError(
                "This tool needs a clipboard command (pbcopy, wl-copy, xclip or xsel). "
                "Install one, or run with --print."
            )

    def run(self) -> StandupResult:
        """Run the stand-up flow.

        Returns:
            StandupResult describing what happened.

        Raises:
            StandupError: On any fatal precondition failure.
        """
        self.check_dependencies()

        api_key = CredentialStore(self.config).ensure(self.prompter)

        task_file = self.config.task_file_path
        if not ensure_task_file(task_file):
            self.prompter.echo(
                f"ℹ️ Created '{task_file}'. Please add your tickets/tasks to it "
                "and run the script again."
            )
            return StandupResult(created_task_file=True)

        self.prompter.echo(f"ℹ️ Processing tickets and tasks from '{task_file}'...")
        lines = read_task_file(task_file)

        client = self.client_factory(api_key, self.config.api_url)
        try:
            work_items = build_work_items(lines, client, notify=self.prompter.echo)
        finally:
            close = getattr(client, "close", None)
            if callable(close):
                close()

        self.prompter.echo()
        plans = self.prompter.text(PLANS_PROMPT)
        blockers = self.prompter.text(BLOCKERS_PROMPT)

        message = assemble(work_items, plans, blockers)
        self.publish(message.render())
        reset_task_file(task_file)
        logger.info("Stand-up published with %d work item(s)", len(work_items))

        self.prompter.echo()
        if self.use_clipboard:
            self.prompter.echo(
                "✅ Stand-up message has been copied to your clipboard!", color="green"
            )
        self.prompter.echo(
            f"ℹ️ Cleared '{task_file}' for next time. Paste the message into Slack."
        )
        return StandupResult(message=message)

    def _print_message(self, text: str) -> None:
        self.prompter.echo()
        self.prompter.echo(text)
