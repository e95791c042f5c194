"""Configuration for the dailyops command-line tools."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

LINEAR_API_URL = "https://api.linear.app/graphql"

DEFAULT_ENV_FILE = ".env"
DEFAULT_TICKETS_FILE = "tickets.md"
DEFAULT_IGNORE_FILE = ".gitignore"


@dataclass
class StandupConfig:
    """File locations and endpoint used by the stand-up generator.

    Built once at startup and handed to every component, so nothing reads
    paths from the environment on its own.
    """

    credential_path: Path
    task_file_path: Path
    ignore_file_path: Path
    api_url: str = LINEAR_API_URL

    @classmethod
    def from_env(
        cls,
        base_dir: str | Path | None = None,
        env_file: str | Path | None = None,
        tickets_file: str | Path | None = None,
    ) -> StandupConfig:
        """Create config from defaults, environment variables and overrides.

        Precedence: explicit argument, then DAILYOPS_* environment variable,
        then a default file name inside base_dir.

        Args:
            base_dir: Directory holding the default files. Defaults to cwd.
            env_file: Explicit credential file path.
            tickets_file: Explicit task file path.

        Returns:
            Resolved configuration.
        """
        base = Path(base_dir) if base_dir is not None else Path.cwd()

        credential_path = _resolve(
            base, env_file, os.environ.get("DAILYOPS_ENV_FILE"), DEFAULT_ENV_FILE
        )
        task_file_path = _resolve(
            base, tickets_file, os.environ.get("DAILYOPS_TICKETS_FILE"), DEFAULT_TICKETS_FILE
        )
        ignore_override = os.environ.get("DAILYOPS_IGNORE_FILE")
        if ignore_override:
            ignore_file_path = _resolve(base, None, ignore_override, DEFAULT_IGNORE_FILE)
        else:
            # Keep the ignore list next to the credential file it protects
            ignore_file_path = credential_path.parent / DEFAULT_IGNORE_FILE

        return cls(
            credential_path=credential_path,
            task_file_path=task_file_path,
            ignore_file_path=ignore_file_path,
            api_url=os.environ.get("DAILYOPS_LINEAR_API_URL", LINEAR_API_URL),
        )


@dataclass
class CleanupConfig:
    """Settings for the branch cleanup tool."""

    repo_path: Path = Path(".")
    remote: str = "origin"
    pr_list_limit: int = 20
    summary_pr_limit: int = 10


def _resolve(
    base: Path,
    explicit: str | Path | None,
    from_env: str | None,
    default: str,
) -> Path:
    value = explicit if explicit is not None else (from_env or default)
    path = Path(value).expanduser()
    if not path.is_absolute():
        path = base / path
    return path
