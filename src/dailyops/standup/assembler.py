"""Builds work items and the final stand-up message."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from dailyops.standup.exceptions import IssueNotFoundError, IssueTrackerError
from dailyops.standup.linear import IssueTrackerClient
from dailyops.standup.models import FreeTextLine, StandupMessage, TaskLine, TicketLine, WorkItem

logger = logging.getLogger("dailyops.standup.assembler")

DEFAULT_BLOCKERS = "None"


def build_work_item(
    line: TaskLine,
    client: IssueTrackerClient,
    notify: Callable[[str], None] | None = None,
) -> WorkItem:
    """Turn a classified task line into a work item.

    Ticket lines are resolved through the client. When resolution fails
    the raw line is used unchanged, so one bad ticket never stops a run.

    Args:
        line: Classified task line.
        client: Issue tracker used to look up ticket titles.
        notify: Optional callback for progress messages.

    Returns:
        WorkItem for the report.
    """
    notify = notify or (lambda _message: None)

    if isinstance(line, FreeTextLine):
        notify(f"ℹ️   - Added manual entry: {line.text}")
        return WorkItem(label=line.text, source_line=line.text)

    try:
        title = client.resolve_title(line.ticket_id)
    except IssueNotFoundError:
        notify(f"ℹ️ Could not find title for '{line.ticket_id}'. Using line as is.")
        return WorkItem(label=line.text, source_line=line.text)
    except IssueTrackerError as e:
        notify(f"ℹ️ Could not fetch '{line.ticket_id}': {e}. Using line as is.")
        return WorkItem(label=line.text, source_line=line.text)

    notify(f"  - Fetched: {line.ticket_id}")
    return WorkItem(label=format_ticket_label(line, title), source_line=line.text)


def format_ticket_label(line: TicketLine, title: str) -> str:
    """Format "<id>: <title>" with an optional " - <annotation>" suffix."""
    label = f"{line.ticket_id}: {title}"
    if line.annotation:
        label += f" - {line.annotation}"
    return label


def build_work_items(
    lines: Iterable[TaskLine],
    client: IssueTrackerClient,
    notify: Callable[[str], None] | None = None,
) -> list[WorkItem]:
    """Resolve lines one at a time, keeping file order."""
    items = [build_work_item(line, client, notify) for line in lines]
    logger.info("Built %d work item(s)", len(items))
    return items


def assemble(work_items: list[WorkItem], plans: str, blockers: str) -> StandupMessage:
    """Assemble the stand-up message.

    Args:
        work_items: Items for the first section, in order.
        plans: What the user plans to work on.
        blockers: Blockers; defaults to "None" when blank.

    Returns:
        StandupMessage ready to render.
    """
    blockers = blockers.strip() or DEFAULT_BLOCKERS
    return StandupMessage(work_items=list(work_items), plans=plans.strip(), blockers=blockers)
