"""Unit tests for StandupGenerator."""

from unittest.mock import MagicMock, patch

import pytest

from dailyops.config import StandupConfig
from dailyops.standup import (
    ClipboardUnavailableError,
    IssueTrackerError,
    NoTasksError,
    StandupGenerator,
)
from dailyops.standup.generator import BLOCKERS_PROMPT, PLANS_PROMPT
from dailyops.standup.tasks import PLACEHOLDER


class FakeTracker:
    """Issue tracker returning canned titles."""

    def __init__(self, titles: dict[str, str]) -> None:
        self.titles = titles
        self.requested: list[str] = []
        self.closed = False

    def resolve_title(self, ticket_id: str) -> str:
        self.requested.append(ticket_id)
        if ticket_id not in self.titles:
            raise IssueTrackerError("Entity not found")
        return self.titles[ticket_id]

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def configured(standup_config: StandupConfig) -> StandupConfig:
    """Config with a stored API key."""
    standup_config.credential_path.write_text("LINEAR_API_KEY=lin_api_test\n")
    return standup_config


def _generator(config, prompter, tracker, published):
    return StandupGenerator(
        config=config,
        prompter=prompter,
        client_factory=lambda api_key, api_url: tracker,
        publish=published.append,
    )


@pytest.mark.unit
class TestRun:
    """Tests for StandupGenerator.run."""

    def test_end_to_end_message(self, configured: StandupConfig, make_prompter) -> None:
        """Resolved ticket, manual entry, plans and default blockers."""
        configured.task_file_path.write_text("ABC-12 fix login\njust a note\n")
        tracker = FakeTracker({"ABC-12": "Fix login bug"})
        prompter = make_prompter("write tests", "")
        published: list[str] = []

        result = _generator(configured, prompter, tracker, published).run()

        assert published == [
            "1. *What have you been up to?*\n"
            "  - ABC-12: Fix login bug - fix login\n"
            "  - just a note\n"
            "\n"
            "2. *What do you plan to work on?*\n"
            "  - write tests\n"
            "\n"
            "3. *Any blockers?*\n"
            "  - None"
        ]
        assert result.message is not None
        assert result.message.blockers == "None"
        assert prompter.prompts == [PLANS_PROMPT, BLOCKERS_PROMPT]
        assert tracker.requested == ["ABC-12"]
        assert tracker.closed

    def test_resets_task_file_after_publish(
        self, configured: StandupConfig, make_prompter
    ) -> None:
        """Task file holds only the placeholder afterwards."""
        configured.task_file_path.write_text("ABC-12\n")

        _generator(configured, make_prompter("p", "b"), FakeTracker({}), []).run()

        assert configured.task_file_path.read_text() == PLACEHOLDER + "\n"

    def test_failed_lookup_uses_raw_line(self, configured: StandupConfig, make_prompter) -> None:
        """Unknown tickets fall back to the line and the run continues."""
        configured.task_file_path.write_text("ZZ-404 mystery\n")
        prompter = make_prompter("p", "blocked on infra")
        published: list[str] = []

        _generator(configured, prompter, FakeTracker({}), published).run()

        assert "  - ZZ-404 mystery\n" in published[0]
        assert published[0].endswith("  - blocked on infra")
        assert "Could not fetch 'ZZ-404': Entity not found" in prompter.text_output

    def test_creates_missing_task_file_and_stops(
        self, configured: StandupConfig, make_prompter
    ) -> None:
        """First run creates the task file and publishes nothing."""
        published: list[str] = []
        tracker = FakeTracker({})

        result = _generator(configured, make_prompter(), tracker, published).run()

        assert result.created_task_file
        assert result.message is None
        assert configured.task_file_path.read_text() == PLACEHOLDER + "\n"
        assert published == []
        assert tracker.requested == []

    def test_no_tasks_keeps_file(self, configured: StandupConfig, make_prompter) -> None:
        """Empty task list is fatal and leaves the file alone."""
        configured.task_file_path.write_text(PLACEHOLDER + "\n")

        with pytest.raises(NoTasksError):
            _generator(configured, make_prompter(), FakeTracker({}), []).run()

        assert configured.task_file_path.read_text() == PLACEHOLDER + "\n"

    def test_prompts_for_key_on_first_run(
        self, standup_config: StandupConfig, make_prompter
    ) -> None:
        """Key is requested before anything else when missing."""
        standup_config.task_file_path.write_text("note\n")
        seen_keys: list[str] = []
        prompter = make_prompter("lin_api_new", "plans", "")

        def factory(api_key: str, api_url: str) -> FakeTracker:
            seen_keys.append(api_key)
            return FakeTracker({})

        StandupGenerator(
            config=standup_config, prompter=prompter, client_factory=factory, publish=print
        ).run()

        assert seen_keys == ["lin_api_new"]
        assert prompter.prompts[0] == "Please enter your Linear API key:"

    def test_publish_failure_keeps_task_file(
        self, configured: StandupConfig, make_prompter
    ) -> None:
        """The task file is only reset after publishing succeeds."""
        configured.task_file_path.write_text("note\n")
        publish = MagicMock(side_effect=RuntimeError("boom"))
        generator = StandupGenerator(
            config=configured,
            prompter=make_prompter("p", ""),
            client_factory=lambda api_key, api_url: FakeTracker({}),
            publish=publish,
        )

        with pytest.raises(RuntimeError):
            generator.run()

        assert configured.task_file_path.read_text() == "note\n"


@pytest.mark.unit
class TestOutputDestination:
    """Tests for clipboard and print output."""

    def test_missing_clipboard_fails_before_prompting(
        self, configured: StandupConfig, make_prompter
    ) -> None:
        """No clipboard tool is fatal up front."""
        prompter = make_prompter()
        generator = StandupGenerator(config=configured, prompter=prompter)

        with (
            patch("dailyops.standup.generator.find_clipboard_command", return_value=None),
            pytest.raises(ClipboardUnavailableError),
        ):
            generator.run()

        assert prompter.prompts == []

    def test_print_mode_skips_clipboard(self, configured: StandupConfig, make_prompter) -> None:
        """With use_clipboard=False the message is echoed."""
        configured.task_file_path.write_text("note\n")
        prompter = make_prompter("p", "")
        generator = StandupGenerator(
            config=configured,
            prompter=prompter,
            client_factory=lambda api_key, api_url: FakeTracker({}),
            use_clipboard=False,
        )

        with patch("dailyops.standup.generator.find_clipboard_command", return_value=None):
            generator.run()

        assert "1. *What have you been up to?*\n  - note" in prompter.text_output
        assert "copied to your clipboard" not in prompter.text_output
