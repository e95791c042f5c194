"""Shared pytest fixtures and configuration."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from dailyops.config import StandupConfig


# Register custom markers
def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: fast tests with no external dependencies")
    config.addinivalue_line("markers", "integration: tests against real git repositories")


class ScriptedPrompter:
    """Prompter that replays canned answers and records everything shown."""

    def __init__(self, answers: list[str] | None = None) -> None:
        self.answers = list(answers or [])
        self.prompts: list[str] = []
        self.output: list[str] = []
        self.pauses = 0

    def _next(self, message: str) -> str:
        self.prompts.append(message)
        if not self.answers:
            raise AssertionError(f"Unexpected prompt: {message}")
        return self.answers.pop(0)

    def secret(self, message: str) -> str:
        return self._next(message).strip()

    def text(self, message: str) -> str:
        return self._next(message).strip()

    def confirm(self, message: str) -> bool:
        return self._next(message).strip() in ("y", "Y")

    def pause(self, message: str = "Press Enter to continue...") -> None:
        self.pauses += 1

    def echo(self, message: str = "", color: str | None = None, err: bool = False) -> None:
        self.output.append(message)

    @property
    def text_output(self) -> str:
        return "\n".join(self.output)


@pytest.fixture
def make_prompter() -> Callable[..., ScriptedPrompter]:
    """Build a ScriptedPrompter with the given answers."""

    def _make(*answers: str) -> ScriptedPrompter:
        return ScriptedPrompter(list(answers))

    return _make


@pytest.fixture
def standup_config(tmp_path: Path) -> StandupConfig:
    """Stand-up configuration rooted in a temporary directory."""
    return StandupConfig(
        credential_path=tmp_path / ".env",
        task_file_path=tmp_path / "tickets.md",
        ignore_file_path=tmp_path / ".gitignore",
        api_url="https://linear.test/graphql",
    )


@pytest.fixture(autouse=True)
def isolated_log_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep log files written by CLI tests out of the home directory."""
    log_dir = tmp_path / "logs"
    monkeypatch.setenv("DAILYOPS_LOG_DIR", str(log_dir))
    return log_dir
