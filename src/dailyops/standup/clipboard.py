"""Copying text to the system clipboard."""

from __future__ import annotations

import logging
import shutil
import subprocess
import sys

from dailyops.standup.exceptions import ClipboardUnavailableError

logger = logging.getLogger("dailyops.standup.clipboard")

# Tried in order; the first one found on PATH wins.
LINUX_COMMANDS = (
    ("wl-copy",),
    ("xclip", "-selection", "clipboard"),
    ("xsel", "--clipboard", "--input"),
)


def find_clipboard_command() -> list[str] | None:
    """Return the argv of a usable clipboard command, or None."""
    if sys.platform == "darwin":
        candidates: tuple[tuple[str, ...], ...] = (("pbcopy",),)
    elif sys.platform.startswith("win"):
        candidates = (("clip",),)
    else:
        candidates = LINUX_COMMANDS

    for argv in candidates:
        if shutil.which(argv[0]):
            return list(argv)
    return None


def copy_to_clipboard(text: str) -> None:
    """Pipe text into the clipboard command.

    A failing command is logged but not raised; nothing checks that the
    clipboard actually holds the text afterwards.

    Raises:
        ClipboardUnavailableError: If no clipboard command exists.
    """
    argv = find_clipboard_command()
    if argv is None:
        raise ClipboardUnavailableError(
            "No clipboard command found (pbcopy, wl-copy, xclip, xsel)."
        )

    result = subprocess.run(argv, input=text, text=True, capture_output=True, check=False)
    if result.returncode != 0:
        logger.warning("%s exited with %d: %s", argv[0], result.returncode, result.stderr)
    else:
        logger.info("Copied %d characters with %s", len(text), argv[0])
