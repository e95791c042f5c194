"""Text formatting for the cleanup menu output."""

from __future__ import annotations

from datetime import UTC, datetime

from dailyops.cleanup.models import PullRequest

_UNITS = (
    (365 * 24 * 3600, "year"),
    (30 * 24 * 3600, "month"),
    (7 * 24 * 3600, "week"),
    (24 * 3600, "day"),
    (3600, "hour"),
    (60, "minute"),
)


def timeago(moment: datetime | None, now: datetime | None = None) -> str:
    """Describe how long ago a moment was, e.g. "about 3 days ago"."""
    if moment is None:
        return "unknown"
    now = now or datetime.now(UTC)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)

    seconds = int((now - moment).total_seconds())
    if seconds < 60:
        return "less than a minute ago"
    for size, unit in _UNITS:
        if seconds >= size:
            count = seconds // size
            plural = "" if count == 1 else "s"
            return f"about {count} {unit}{plural} ago"
    return "less than a minute ago"


def format_pr_detail(pr: PullRequest, now: datetime | None = None) -> str:
    """Multi-line block used by the merged PR listing."""
    return (
        f"PR #{pr.number}: {pr.title}\n"
        f"  Branch: {pr.head_branch}\n"
        f"  Author: {pr.author}\n"
        f"  Merged: {timeago(pr.merged_at, now)}"
    )


def format_pr_line(pr: PullRequest, now: datetime | None = None) -> str:
    """One-line form: "PR #12: Title (merged about 2 days ago)"."""
    return f"PR #{pr.number}: {pr.title} (merged {timeago(pr.merged_at, now)})"


def format_pr_short(pr: PullRequest, now: datetime | None = None) -> str:
    """Compact form: "#12: Title (about 2 days ago)"."""
    return f"#{pr.number}: {pr.title} ({timeago(pr.merged_at, now)})"
