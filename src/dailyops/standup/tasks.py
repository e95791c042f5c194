"""Reading, classifying and resetting the task file."""

from __future__ import annotations

import logging
import os
import re
import shutil
import tempfile
from pathlib import Path

from dailyops.standup.exceptions import NoTasksError
from dailyops.standup.models import FreeTextLine, TaskLine, TicketLine

logger = logging.getLogger("dailyops.standup.tasks")

# Ticket references look like ABC-123: two or more capitals, a hyphen, digits.
# The leftmost match in a line is the ticket; anything else is annotation.
TICKET_PATTERN = re.compile(r"[A-Z]{2,}-[0-9]+")

PLACEHOLDER = "# Add Linear ticket numbers or tasks here, one per line."


def classify_line(text: str) -> TaskLine:
    """Classify a task line as a ticket reference or free text.

    Args:
        text: A single line from the task file.

    Returns:
        TicketLine if the line contains a ticket reference, else FreeTextLine.
    """
    line = text.strip()
    match = TICKET_PATTERN.search(line)
    if match is None:
        return FreeTextLine(text=line)

    ticket_id = match.group(0)
    annotation = (line[: match.start()] + line[match.end() :]).strip()
    return TicketLine(ticket_id=ticket_id, annotation=annotation, text=line)


def is_skipped(text: str) -> bool:
    """Return True for blank lines and comment lines."""
    stripped = text.strip()
    return not stripped or stripped.startswith("#")


def read_task_file(path: Path) -> list[TaskLine]:
    """Read and classify every task line, in file order.

    Bytes that are not valid UTF-8 are replaced with U+FFFD rather than
    failing the whole file.

    Args:
        path: Path to the task file.

    Returns:
        Classified lines, blanks and comments removed.

    Raises:
        NoTasksError: If no line is left after skipping.
    """
    lines: list[TaskLine] = []
    with path.open(encoding="utf-8", errors="replace") as handle:
        for raw in handle:
            raw = raw.rstrip("\n").rstrip("\r")
            if is_skipped(raw):
                continue
            lines.append(classify_line(raw))

    logger.info("Read %d task line(s) from %s", len(lines), path)
    if not lines:
        raise NoTasksError(f"No tasks or tickets found in '{path}'.")
    return lines


def ensure_task_file(path: Path) -> bool:
    """Create the task file with the placeholder comment if it is missing.

    Returns:
        True if the file already existed, False if it was just created.
    """
    if path.exists():
        return True
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(PLACEHOLDER + "\n", encoding="utf-8")
    logger.info("Created task file %s", path)
    return False


def reset_task_file(path: Path) -> None:
    """Overwrite the task file with the placeholder comment.

    Writes a temp file next to the real file and swaps it in, so an
    interrupted reset leaves either the old or the new content. A symlinked
    task file stays a symlink and the file keeps its permissions.
    """
    target = path.resolve()
    fd, tmp_name = tempfile.mkstemp(prefix=f".{target.name}.", dir=target.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(PLACEHOLDER + "\n")
        if target.exists():
            shutil.copymode(target, tmp_name)
        os.replace(tmp_name, target)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
    logger.info("Reset task file %s", path)
