"""Data models for the stand-up generator."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class TicketLine:
    """Task file line that references a ticket.

    Attributes:
        ticket_id: The leftmost ticket reference in the line.
        annotation: The rest of the line with the ticket removed, trimmed.
        text: The original (trimmed) line.
    """

    ticket_id: str
    annotation: str
    text: str


@dataclass(frozen=True)
class FreeTextLine:
    """Task file line without a ticket reference."""

    text: str


TaskLine = TicketLine | FreeTextLine


@dataclass(frozen=True)
class WorkItem:
    """One entry of the "what have you been up to" section."""

    label: str
    source_line: str


@dataclass
class StandupMessage:
    """The three sections of a stand-up report."""

    work_items: list[WorkItem] = field(default_factory=list)
    plans: str = ""
    blockers: str = "None"

    def render(self) -> str:
        """Render the message in its fixed three-section layout."""
        done = "\n".join(f"  - {item.label}" for item in self.work_items)
        return (
            "1. *What have you been up to?*\n"
            f"{done}\n"
            "\n"
            "2. *What do you plan to work on?*\n"
            f"  - {self.plans}\n"
            "\n"
            "3. *Any blockers?*\n"
            f"  - {self.blockers}"
        )


@dataclass
class StandupResult:
    """Outcome of one stand-up run.

    Attributes:
        created_task_file: True when the task file did not exist and was
            created; nothing else happened in that run.
        message: The assembled message, when one was produced.
    """

    created_task_file: bool = False
    message: StandupMessage | None = None
