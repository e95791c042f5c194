"""Unit tests for the standup command."""

from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from dailyops.standup.cli import main
from dailyops.standup.tasks import PLACEHOLDER


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def files(tmp_path: Path) -> dict[str, Path]:
    env_file = tmp_path / ".env"
    env_file.write_text("LINEAR_API_KEY=lin_api_test\n")
    return {"env": env_file, "tickets": tmp_path / "tickets.md"}


def _args(files: dict[str, Path], *extra: str) -> list[str]:
    return ["--env-file", str(files["env"]), "--tickets-file", str(files["tickets"]), *extra]


@pytest.mark.unit
class TestStandupCommand:
    """Tests for the standup CLI."""

    def test_print_mode_outputs_message(self, runner: CliRunner, files: dict[str, Path]) -> None:
        """--print writes the assembled message and exits 0."""
        files["tickets"].write_text("ABC-12 fix login\njust a note\n")

        with patch("dailyops.standup.generator.LinearClient") as client_cls:
            client_cls.return_value.resolve_title.return_value = "Fix login bug"
            result = runner.invoke(main, _args(files, "--print"), input="write tests\n\n")

        assert result.exit_code == 0, result.output
        assert "  - ABC-12: Fix login bug - fix login" in result.output
        assert "  - just a note" in result.output
        assert "  - write tests" in result.output
        assert "3. *Any blockers?*\n  - None" in result.output
        assert files["tickets"].read_text() == PLACEHOLDER + "\n"
        client_cls.assert_called_once_with(
            api_key="lin_api_test", api_url="https://api.linear.app/graphql"
        )

    def test_first_run_creates_task_file(self, runner: CliRunner, files: dict[str, Path]) -> None:
        """Missing task file is created and the command exits 0."""
        result = runner.invoke(main, _args(files, "--print"))

        assert result.exit_code == 0, result.output
        assert "Created" in result.output
        assert files["tickets"].exists()

    def test_empty_task_list_exits_1(self, runner: CliRunner, files: dict[str, Path]) -> None:
        """No tasks is a fatal error."""
        files["tickets"].write_text(PLACEHOLDER + "\n")

        result = runner.invoke(main, _args(files, "--print"))

        assert result.exit_code == 1
        assert "No tasks or tickets found" in result.output

    def test_empty_api_key_exits_1(self, runner: CliRunner, tmp_path: Path) -> None:
        """Empty key at the prompt is fatal."""
        args = [
            "--env-file",
            str(tmp_path / ".env"),
            "--tickets-file",
            str(tmp_path / "tickets.md"),
            "--print",
        ]

        result = runner.invoke(main, args, input="\n")

        assert result.exit_code == 1
        assert "API key cannot be empty" in result.output
        assert not (tmp_path / ".env").exists()

    def test_missing_clipboard_exits_1(self, runner: CliRunner, files: dict[str, Path]) -> None:
        """Without --print a missing clipboard tool is fatal."""
        with patch("dailyops.standup.generator.find_clipboard_command", return_value=None):
            result = runner.invoke(main, _args(files))

        assert result.exit_code == 1
        assert "clipboard" in result.output
