"""CredentialStore - Keeps the Linear API key in a dotenv file."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from dotenv import dotenv_values, set_key

from dailyops.standup.exceptions import CredentialError

if TYPE_CHECKING:
    from dailyops.config import StandupConfig
    from dailyops.prompts import Prompter

logger = logging.getLogger("dailyops.standup.credentials")

CREDENTIAL_KEY = "LINEAR_API_KEY"


class CredentialStore:
    """Reads the API key from a dotenv file, asking for it on first run.

    A freshly entered key is written to the dotenv file and the file is
    added to the ignore list so it stays out of version control.
    """

    def __init__(self, config: StandupConfig, key: str = CREDENTIAL_KEY) -> None:
        """Initialize the store.

        Args:
            config: Stand-up configuration with credential and ignore paths.
            key: Name of the credential inside the dotenv file.
        """
        self.path = config.credential_path
        self.ignore_path = config.ignore_file_path
        self.key = key

    def has_key(self) -> bool:
        """Return True if the dotenv file defines the key (even if empty)."""
        if not self.path.is_file():
            return False
        return self.key in dotenv_values(self.path, interpolate=False)

    def load(self) -> str:
        """Return the stored value, or an empty string if unset."""
        if not self.path.is_file():
            return ""
        return (dotenv_values(self.path, interpolate=False).get(self.key) or "").strip()

    def save(self, value: str) -> None:
        """Persist the key and make sure the file is git-ignored."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.touch(exist_ok=True)
        set_key(self.path, self.key, value, quote_mode="never")
        logger.info("Saved %s to %s", self.key, self.path)
        self._ensure_ignored()

    def ensure(self, prompter: Prompter) -> str:
        """Return the API key, prompting for and saving it when absent.

        Args:
            prompter: Used to ask for the key with hidden input.

        Returns:
            The API key as loaded from the store.

        Raises:
            CredentialError: If the entered key is empty, or the store still
                has no value afterwards.
        """
        if not self.has_key():
            prompter.echo("ℹ️ Linear API key not found.")
            value = prompter.secret("Please enter your Linear API key:")
            if not value:
                raise CredentialError("API key cannot be empty.")
            self.save(value)
            prompter.echo(f"✅ API key saved to {self.path}", color="green")

        api_key = self.load()
        if not api_key:
            raise CredentialError(f"{self.key} is not set in {self.path}. Please add it.")
        return api_key

    def _ignore_entry(self) -> str:
        try:
            return self.path.resolve().relative_to(self.ignore_path.parent.resolve()).as_posix()
        except ValueError:
            return str(self.path.resolve())

    def _ensure_ignored(self) -> None:
        entry = self._ignore_entry()
        if not self.ignore_path.exists():
            self.ignore_path.write_text(entry + "\n", encoding="utf-8")
            logger.info("Created %s with %s", self.ignore_path, entry)
            return

        content = self.ignore_path.read_text(encoding="utf-8")
        listed = {line.strip() for line in content.splitlines()}
        if listed & {entry, f"/{entry}", str(self.path.resolve())}:
            logger.debug("%s already lists %s", self.ignore_path, entry)
            return

        with self.ignore_path.open("a", encoding="utf-8") as handle:
            if content and not content.endswith("\n"):
                handle.write("\n")
            handle.write(entry + "\n")
        logger.info("Added %s to %s", entry, self.ignore_path)
